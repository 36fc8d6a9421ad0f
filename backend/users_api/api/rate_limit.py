"""Rate Limiting — per-client request quota for the /users routes using slowapi.

Usage in route modules::

    from users_api.api.rate_limit import users_limit

    @router.get("")
    @users_limit
    async def list_users(request: Request, response: Response): ...

Invariants:
    - One counter per client address shared by every /users route (scope "users")
    - Limit string read from settings on every request, so it can be changed at runtime
    - Decorated endpoints must accept `request` and `response` (slowapi injects headers)
    - Headers use the standard RateLimit-Limit / RateLimit-Remaining / RateLimit-Reset
      names; RateLimit-Reset is seconds until the window resets, not an epoch
    - Every response of a limited route carries them, error responses included
"""

import logging
import math
import time

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from slowapi import Limiter
from slowapi.extension import HEADERS
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from users_api.config import get_settings
from users_api.core.domain_types import UserMessage
from users_api.core.errors import ErrorCategory, ErrorSeverity

logger = logging.getLogger(__name__)

USERS_SCOPE = "users"

STANDARD_HEADER_NAMES = {
    HEADERS.LIMIT: "RateLimit-Limit",
    HEADERS.REMAINING: "RateLimit-Remaining",
    HEADERS.RESET: "RateLimit-Reset",
}


class StandardHeadersLimiter(Limiter):
    """slowapi Limiter that reports quotas with the standard RateLimit-* headers."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._header_mapping.update(STANDARD_HEADER_NAMES)

    def _inject_headers(self, response, current_limit):
        response = super()._inject_headers(response, current_limit)
        reset_name = STANDARD_HEADER_NAMES[HEADERS.RESET]
        reset_at = response.headers.get(reset_name)
        if reset_at is not None:
            response.headers[reset_name] = str(
                max(0, math.ceil(float(reset_at) - time.time())),
            )
        return response


_settings = get_settings()

# Headers follow the enabled flag: a disabled limiter records no window to report
limiter = StandardHeadersLimiter(
    key_func=get_remote_address,
    headers_enabled=_settings.rate_limit_enabled,
    enabled=_settings.rate_limit_enabled,
)


def users_rate_limit() -> str:
    """Current /users limit, e.g. "100/15minutes"."""
    return get_settings().users_rate_limit


users_limit = limiter.shared_limit(users_rate_limit, scope=USERS_SCOPE)


def attach_rate_limit_headers(request: Request, response: Response) -> Response:
    """Copy the current quota onto a response built outside the limited endpoint."""
    current_limit = getattr(request.state, "view_rate_limit", None)
    if current_limit is None:
        return response
    return request.app.state.limiter._inject_headers(response, current_limit)


async def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded,
) -> JSONResponse:
    """429 with the usual message envelope plus RateLimit-* / Retry-After headers."""
    logger.warning(
        f"Rate limit exceeded on {request.url.path}: {exc.detail}",
        extra={"path": request.url.path, "error_code": "RATE_LIMITED"},
    )
    response = JSONResponse(
        status_code=429,
        content={
            "message": UserMessage.RATE_LIMITED.value,
            "error": {
                "code": "RATE_LIMITED",
                "category": ErrorCategory.RATE_LIMITED.value,
                "severity": ErrorSeverity.WARNING.value,
                "limit": exc.detail,
            },
        },
    )
    return attach_rate_limit_headers(request, response)


def apply_rate_limiting(app: FastAPI) -> None:
    """Attach the limiter to the app and register the 429 handler."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    logger.info(
        f"Rate limiting {'enabled' if limiter.enabled else 'disabled'} "
        f"({users_rate_limit()} per client on /users)",
    )
