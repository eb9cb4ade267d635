"""Request timeout middleware.

A request that runs past the limit is cancelled and answered with 504 in
the constants error shape ({"success": false, "error": ...}). Raw ASGI.
"""

import asyncio
import json
import logging
from typing import Callable

logger = logging.getLogger(__name__)


def TimeoutMiddleware(app: Callable, timeout_seconds: float) -> Callable:
    """Cancel the request after timeout_seconds.

    When the response has already started, the connection is left to the
    server; a second response start would be a protocol error.
    """

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        started = False

        async def send_wrapper(message: dict) -> None:
            nonlocal started
            if message["type"] == "http.response.start":
                started = True
            await send(message)

        try:
            await asyncio.wait_for(app(scope, receive, send_wrapper), timeout=timeout_seconds)
        except asyncio.TimeoutError:
            logger.warning(
                "Request timed out after %ss: %s %s",
                timeout_seconds,
                scope.get("method", ""),
                scope.get("path", ""),
            )
            if started:
                return
            body = json.dumps(
                {"success": False, "error": f"Request timed out after {timeout_seconds} seconds"}
            ).encode()
            await send({
                "type": "http.response.start",
                "status": 504,
                "headers": [
                    (b"content-type", b"application/json"),
                    (b"content-length", str(len(body)).encode()),
                ],
            })
            await send({"type": "http.response.body", "body": body, "more_body": False})

    return asgi_app
