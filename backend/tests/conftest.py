"""Root conftest — shared test configuration."""

import os
from itertools import count

import pytest

# Tests always exercise the limiter and read plain-text logs
os.environ.setdefault("RATE_LIMIT_ENABLED", "true")
os.environ.setdefault("LOG_FORMAT", "text")

from users_api.core.domain_types import UserId  # noqa: E402
from users_api.core.user_registry import UserRegistry  # noqa: E402


@pytest.fixture
def sequential_ids():
    """Deterministic id factory: u1, u2, u3, ..."""
    counter = count(1)
    return lambda: UserId(f"u{next(counter)}")


@pytest.fixture
def registry():
    """Fresh seeded registry with real uuid ids."""
    return UserRegistry.seeded()
