"""Request context middleware: request ID, correlation ID, access log.

Forwards or generates X-Request-ID and X-Correlation-ID, stores both on
scope["state"], echoes them on the response, and logs one line per request
with status and duration. Raw ASGI (no BaseHTTPMiddleware).
"""

import logging
import re
import time
import uuid
from typing import Callable

logger = logging.getLogger("app.access")

ID_MAX_LENGTH = 64
_SAFE_ID = re.compile(r"^[a-zA-Z0-9_-]{1," + str(ID_MAX_LENGTH) + r"}$")


def _get_header(scope: dict, name: str) -> str | None:
    """Return first header value for name (case-insensitive). Headers are (bytes, bytes)."""
    want = name.lower().encode()
    for k, v in scope.get("headers", []):
        if k.lower() == want:
            return v.decode("utf-8", errors="replace")
    return None


def sanitize_id(raw: str | None) -> str | None:
    """Return the stripped value when it is safe to log, else None."""
    if not raw:
        return None
    value = raw.strip()
    return value if _SAFE_ID.match(value) else None


def RequestContextMiddleware(
    app: Callable,
    request_id_header: str = "X-Request-ID",
    correlation_id_header: str = "X-Correlation-ID",
) -> Callable:
    """Attach request/correlation IDs and log the request outcome. Raw ASGI.

    The correlation ID falls back to the request ID when the caller sent none.
    """
    rid_name = request_id_header.encode()
    cid_name = correlation_id_header.encode()

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_id(_get_header(scope, request_id_header)) or str(uuid.uuid4())
        correlation_id = sanitize_id(_get_header(scope, correlation_id_header)) or request_id
        state = scope.setdefault("state", {})
        state["request_id"] = request_id
        state["correlation_id"] = correlation_id
        status_code = 500
        started = time.perf_counter()

        async def send_wrapper(message: dict) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                headers = list(message.get("headers", []))
                headers.append((rid_name, request_id.encode()))
                headers.append((cid_name, correlation_id.encode()))
                message["headers"] = headers
            await send(message)

        try:
            await app(scope, receive, send_wrapper)
        finally:
            logger.info(
                "%s %s -> %s (%.1f ms) request_id=%s",
                scope.get("method", ""),
                scope.get("path", ""),
                status_code,
                (time.perf_counter() - started) * 1000,
                request_id,
            )

    return asgi_app
