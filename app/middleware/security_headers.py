"""Security headers middleware for a JSON-only API.

HSTS is sent only when enabled (production behind TLS). Existing headers
set by a route are never overwritten. Raw ASGI.
"""

from typing import Callable

API_HEADERS = {
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
}
HSTS_VALUE = "max-age=31536000; includeSubDomains"


def SecurityHeadersMiddleware(app: Callable, hsts: bool = False) -> Callable:
    """Add API security headers (and HSTS when hsts=True) to every response."""
    resolved = dict(API_HEADERS)
    if hsts:
        resolved["Strict-Transport-Security"] = HSTS_VALUE
    header_list = [(k.lower().encode(), v.encode()) for k, v in resolved.items()]

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                present = {name.lower() for name, _ in headers}
                headers.extend(h for h in header_list if h[0] not in present)
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
