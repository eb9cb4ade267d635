"""HTTP middleware: timeout, request context (IDs + access log), security headers.

Applied in main app; order matters (last added = outermost).
Import and use from app.main.
"""

from app.middleware.request_context import RequestContextMiddleware
from app.middleware.security_headers import SecurityHeadersMiddleware
from app.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestContextMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
