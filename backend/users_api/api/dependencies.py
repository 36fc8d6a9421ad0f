"""Request Dependencies — hands the app-owned registry to route handlers.

Invariants:
    - The registry lives on app.state; this is the only way routes reach it
    - Tests swap the registry with app.dependency_overrides[get_registry]
"""

from fastapi import Request

from users_api.core.user_registry import UserRegistry


def get_registry(request: Request) -> UserRegistry:
    """FastAPI dependency for the user registry."""
    registry = getattr(request.app.state, "registry", None)
    if registry is None:
        raise RuntimeError("User registry not initialized")
    return registry
