"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps str — ids are opaque, never parsed
    - UPDATABLE_FIELDS is the closed set of fields a partial update may touch

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", str)


# ─── Value Types ─────────────────────────────────────────────────

Age = int | float


# ─── Constants ───────────────────────────────────────────────────

UPDATABLE_FIELDS = ("name", "age")
MAX_ID_ATTEMPTS = 8


# ─── Enums ───────────────────────────────────────────────────────

class UserMessage(str, Enum):
    """User-facing response messages."""
    CREATED = "user has been created"
    UPDATED = "user has been updated"
    DELETED = "user deleted"
    NOT_FOUND = "user not found"
    DOES_NOT_EXIST = "user doesn't exist"
    ALREADY_EXISTS = "user already exists"
    RESET_DONE = "Done"
    SOMETHING_WENT_WRONG = "something went wrong"
    PROBE = "error"
    RATE_LIMITED = "Too many requests, please try again later."
