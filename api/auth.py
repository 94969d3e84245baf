"""Authentication middleware for the gestloc system."""

from typing import Any, Callable

from fastapi import Request, status
from fastapi.responses import JSONResponse

from api.models.auth import AuthError
from core.config import Settings
from core.log import get_logger

logger = get_logger(__name__)

SKIP_AUTH_PATHS = {
    "/health",
    "/docs",
    "/openapi.json",
}


class AuthMiddleware:
    """Requires an auth header when the settings demand it.

    Token verification is left to the deployment's gateway.
    """

    def __init__(self, app: Callable[..., Any], settings: Settings) -> None:
        self.app = app
        self.settings = settings

    async def __call__(
        self,
        scope: dict[str, Any],
        receive: Callable[..., Any],
        send: Callable[..., Any],
    ) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive)
        if (
            not self.settings.auth_required
            or request.url.path in SKIP_AUTH_PATHS
            or self._has_auth_header(request)
        ):
            await self.app(scope, receive, send)
            return

        logger.warning(
            f"Missing auth header for {request.url.path} "
            f"in {self.settings.environment.value} mode"
        )
        response = JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content=AuthError(
                detail="Authentication required",
                error="missing_auth_header",
                environment=self.settings.environment.value,
            ).model_dump(),
        )
        await response(scope, receive, send)

    def _has_auth_header(self, request: Request) -> bool:
        auth_header = request.headers.get(self.settings.auth_header_name)
        return auth_header is not None and auth_header.strip() != ""
