"""User Registry — owned in-memory store of User records with snapshot reset.

Invariants:
    - ids are unique within the collection and never reissued (issued set only grows)
    - names are unique on insert (DuplicateUserError, collection unchanged)
    - update touches only UPDATABLE_FIELDS; id is never overwritten; position preserved
    - reset restores the seed snapshot (order, values and ids)
    - all() returns a copy — callers cannot mutate the store

Design Decisions:
    - Frozen User dataclass: snapshot and live list can share records safely,
      update swaps in a dataclasses.replace() copy
    - Single owner: the FastAPI app holds the instance on app.state, routes get it
      through a dependency (no module-level mutable global)
    - Lookups return None, routes decide the HTTP status (delete reports 400, others 404)
"""

import logging
from dataclasses import dataclass, replace
from typing import Any, Iterable

from users_api.core.domain_types import (
    Age, UserId, UPDATABLE_FIELDS, MAX_ID_ATTEMPTS,
)
from users_api.core.errors import DuplicateUserError, IdentifierExhaustedError
from users_api.core.identifiers import IdFactory, new_user_id
from users_api.core.seed_data import SEED_USERS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class User:
    """A single user record — immutable, replaced wholesale on update."""
    id: UserId
    name: str
    age: Age


class UserRegistry:
    """In-memory, insertion-ordered collection of Users."""

    def __init__(
        self,
        seed: Iterable[tuple[str, Age]] = (),
        id_factory: IdFactory = new_user_id,
    ):
        self._id_factory = id_factory
        self._issued: set[UserId] = set()
        self._users: list[User] = [
            User(id=self._next_id(), name=name, age=age) for name, age in seed
        ]
        self._snapshot: tuple[User, ...] = tuple(self._users)

    @classmethod
    def seeded(cls, id_factory: IdFactory = new_user_id) -> "UserRegistry":
        """Registry pre-loaded with the default seed records."""
        return cls(SEED_USERS, id_factory=id_factory)

    def __len__(self) -> int:
        return len(self._users)

    @property
    def snapshot(self) -> tuple[User, ...]:
        return self._snapshot

    def all(self) -> list[User]:
        return list(self._users)

    def get(self, user_id: str) -> User | None:
        return next((u for u in self._users if u.id == user_id), None)

    def find_by_name(self, name: str) -> User | None:
        return next((u for u in self._users if u.name == name), None)

    def insert(self, name: str, age: Age) -> User:
        """Append a new user. Raises DuplicateUserError if the name is taken."""
        if self.find_by_name(name) is not None:
            raise DuplicateUserError(name)
        user = User(id=self._next_id(), name=name, age=age)
        self._users.append(user)
        return user

    def remove(self, user_id: str) -> bool:
        """Remove the matching user. Returns False if no user has that id."""
        remaining = [u for u in self._users if u.id != user_id]
        if len(remaining) == len(self._users):
            return False
        self._users = remaining
        return True

    def update(self, user_id: str, changes: dict[str, Any]) -> User | None:
        """Shallow-merge updatable fields into the matching user."""
        merged = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
        for index, user in enumerate(self._users):
            if user.id == user_id:
                updated = replace(user, **merged)
                self._users[index] = updated
                return updated
        return None

    def reset(self) -> None:
        """Replace the live collection with the seed snapshot."""
        self._users = list(self._snapshot)

    def _next_id(self) -> UserId:
        for _ in range(MAX_ID_ATTEMPTS):
            candidate = self._id_factory()
            if candidate and candidate not in self._issued:
                self._issued.add(candidate)
                return candidate
            logger.warning(f"Discarding already-issued user id {candidate!r}")
        raise IdentifierExhaustedError(MAX_ID_ATTEMPTS)
