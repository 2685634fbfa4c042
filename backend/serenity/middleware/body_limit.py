"""
Request body size limit middleware for FastAPI applications.
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

# Hard transport limit; base64 images and audio travel in JSON bodies
MAX_BODY_BYTES = 50 * 1024 * 1024


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """
    Middleware rejecting requests whose declared body exceeds a limit.

    Requests without a Content-Length header are passed through; route level
    checks read the actual body.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int = MAX_BODY_BYTES):
        """Initialize the middleware with the byte limit."""
        super().__init__(app)
        self.max_body_bytes = max_body_bytes

    async def dispatch(self, request: Request, call_next):
        declared = request.headers.get("content-length")
        if declared and declared.isdigit() and int(declared) > self.max_body_bytes:
            return JSONResponse(
                status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                content={"success": False, "message": "Request body too large"},
            )

        return await call_next(request)


def setup_body_limit_middleware(app: FastAPI, max_body_bytes: int = MAX_BODY_BYTES):
    """Add the body size limit middleware to a FastAPI application."""
    app.add_middleware(BodySizeLimitMiddleware, max_body_bytes=max_body_bytes)
