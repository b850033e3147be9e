from __future__ import annotations

from typing import Any, Callable

import structlog
from starlette.types import ASGIApp


class RequestLoggingMiddleware:
    """Logs the method and path of each request, then the response status.

    ``app`` is the rest of the pipeline. ``logger`` is any object with an
    ``info(event, **fields)`` method and is owned by the caller.

    Exceptions raised downstream are not caught, so a failed request only
    produces the incoming record.
    """

    def __init__(self, app: ASGIApp, logger: Any | None = None) -> None:
        self.app = app
        self.logger = logger if logger is not None else structlog.get_logger("request_logger")

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        method = scope.get("method")
        path = scope.get("path")
        self.logger.info(f"Incoming Request: {method} {path}", method=method, path=path)

        # Servers answer 500 when the app returns without starting a response.
        status_code: int = 500

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal status_code

            if message.get("type") == "http.response.start":
                status_code = int(message["status"])

            await send(message)

        await self.app(scope, receive, send_wrapper)

        self.logger.info(f"Outgoing Response: {status_code}", status_code=status_code)


def use_request_logging(app: Any, logger: Any | None = None) -> Any:
    """Register RequestLoggingMiddleware so it wraps every middleware added before it."""

    app.add_middleware(RequestLoggingMiddleware, logger=logger)
    return app
