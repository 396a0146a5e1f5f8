"""JSON:API error handling middleware."""

import logging
from typing import Any

from starlette.responses import JSONResponse

from fastapi_jsonapify.config import get_settings
from fastapi_jsonapify.core.errors import JSONAPIErrorBuilder, JSONAPIException

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert exceptions into JSON:API error documents."""

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app
        self.error_builder = JSONAPIErrorBuilder()

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize JSON:API error documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return
        try:
            await self.app(scope, receive, send)
        except JSONAPIException as exc:
            logger.error("%s: %s", type(exc).__name__, exc.detail)
            await self._respond(exc, exc.status, scope, receive, send)
        except Exception as exc:  # noqa: BLE001 - rendered as a 500 error document
            logger.exception("Unhandled error while serving %s", scope.get("path"))
            await self._respond(exc, 500, scope, receive, send)

    async def _respond(self, exc: Exception, status: int, scope: dict[str, Any], receive: Any, send: Any) -> None:
        document = self.error_builder.error_document([self.error_builder.from_exception(exc)])
        response = JSONResponse(document, status_code=status, media_type=get_settings().media_type)
        await response(scope, receive, send)
