"""Per-IP throttle for the credential endpoints (/register and /login).

Built on slowapi's Limiter with the moving-window strategy and in-memory storage.
The check runs in AuthRateLimitMiddleware, ahead of routing and body parsing, so
every attempt is counted, malformed ones included. Refused attempts are not recorded.

Counters live in this process only; several instances need a shared storage_uri
(e.g. redis://).
"""

import logging
from collections.abc import Iterable
from functools import lru_cache

from limits import RateLimitItem, parse
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from app.core.config import get_settings
from app.core.exceptions import RateLimitedError

logger = logging.getLogger(__name__)


class AuthRateLimiter:
    """One shared budget of attempts per client address."""

    scope = "auth"

    def __init__(
        self,
        max_attempts: int,
        window_seconds: int,
        storage_uri: str = "memory://",
    ) -> None:
        self.window_seconds = window_seconds
        self.item: RateLimitItem = parse(f"{max_attempts}/{window_seconds} seconds")
        self.limiter = Limiter(
            key_func=get_remote_address,
            strategy="moving-window",
            storage_uri=storage_uri,
        )

    @property
    def message(self) -> str:
        minutes = max(1, round(self.window_seconds / 60))
        return (
            "Too many login/registration attempts from this IP, "
            f"please try again after {minutes} minutes"
        )

    @property
    def storage(self):
        return self.limiter.limiter.storage

    def hit(self, request: Request) -> bool:
        """Count one attempt for the request's client. False once the budget is spent."""
        return self.limiter.limiter.hit(self.item, self.scope, get_remote_address(request))

    def reset(self) -> None:
        self.limiter.reset()


@lru_cache
def get_auth_rate_limiter() -> AuthRateLimiter:
    """Process-wide limiter built from settings."""
    settings = get_settings()
    return AuthRateLimiter(
        max_attempts=settings.AUTH_RATE_LIMIT_MAX,
        window_seconds=settings.AUTH_RATE_LIMIT_WINDOW_SECONDS,
    )


class AuthRateLimitMiddleware(BaseHTTPMiddleware):
    """
    Throttle POSTs to the given paths using the limiter on app.state.auth_limiter.
    Throttled requests get 429 {"error": ...} and never reach the endpoint.
    """

    def __init__(self, app: ASGIApp, paths: Iterable[str]) -> None:
        super().__init__(app)
        self.paths = frozenset(paths)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.method == "POST" and request.url.path in self.paths:
            limiter: AuthRateLimiter = request.app.state.auth_limiter
            if not limiter.hit(request):
                logger.warning(
                    "Auth rate limit exceeded for %s on %s",
                    get_remote_address(request),
                    request.url.path,
                )
                error = RateLimitedError(limiter.message)
                return JSONResponse(status_code=error.http_status, content={"error": error.message})
        return await call_next(request)
