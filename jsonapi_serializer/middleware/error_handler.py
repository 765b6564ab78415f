"""JSON:API error handling middleware."""

import logging
from typing import Any

from jsonapi_serializer.core.errors import JSONAPIErrorBuilder
from jsonapi_serializer.responses import JSONAPIResponse

logger = logging.getLogger(__name__)


class ErrorHandlerMiddleware:
    """Convert exceptions into JSON:API error documents."""

    error_builder_class: type = JSONAPIErrorBuilder

    def __init__(self, app: Any) -> None:
        """Store the ASGI app for middleware chaining."""
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Any, send: Any) -> None:
        """Handle exceptions and serialize JSON:API error documents."""
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return
        response_started = False

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:  # noqa: BLE001 - converted into an error document
            if response_started:
                raise
            logger.exception("Unhandled error while serving %s", scope.get("path"))
            builder = self.error_builder_class()
            response = JSONAPIResponse(
                builder.error_document([builder.error_from_exception(exc)]),
                status_code=500,
            )
            await response(scope, receive, send)
