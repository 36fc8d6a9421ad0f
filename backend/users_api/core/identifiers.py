"""User Identifiers — collision-resistant id generation.

Invariants:
    - new_user_id() returns a non-empty, URL-safe string (32 lowercase hex chars)
    - Uniqueness across the registry lifetime is enforced by UserRegistry,
      which tracks issued ids and re-draws on collision

Design Decisions:
    - uuid4 over a counter: ids stay opaque and unguessable across restarts
"""

from typing import Callable
from uuid import uuid4

from users_api.core.domain_types import UserId

IdFactory = Callable[[], UserId]


def new_user_id() -> UserId:
    return UserId(uuid4().hex)
