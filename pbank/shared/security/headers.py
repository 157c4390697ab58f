"""
Secure HTTP headers.

Responses can carry bearer tokens and account activity, so nothing is
cached and nothing is framed. The middleware covers routed responses;
``apply_secure_headers`` is also called by the catch-all error handler,
which Starlette runs outside the middleware stack.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "X-XSS-Protection": "0",
    "Cache-Control": "no-store",
}


def apply_secure_headers(response: Response) -> Response:
    """Add any missing secure header to ``response`` and return it."""
    for header_name, header_value in SECURE_HEADERS.items():
        response.headers.setdefault(header_name, header_value)
    return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Applies SECURE_HEADERS to every routed response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        return apply_secure_headers(await call_next(request))
