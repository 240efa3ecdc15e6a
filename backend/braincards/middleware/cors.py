"""
Brain Cards Backend — Permissive CORS Middleware
=================================================

What:  Allows browser pages on any origin to call the API.
Why:   The API is consumed by front-ends served from anywhere (file://,
       dev servers on arbitrary ports). Starlette's CORSMiddleware only
       short-circuits genuine preflights (Origin + Access-Control-Request-Method);
       this service answers every OPTIONS request itself, whatever its headers.
How:   OPTIONS → 200 with an empty JSON-typed body, before routing.
       Any other method → route as usual, then stamp the CORS headers
       on whatever response comes back, errors included.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


class PermissiveCORSMiddleware(BaseHTTPMiddleware):
    """Adds CORS headers to every response and answers OPTIONS directly."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.method == "OPTIONS":
            response = Response(status_code=200, media_type="application/json")
        else:
            response = await call_next(request)

        for name, value in CORS_HEADERS.items():
            response.headers[name] = value
        return response
