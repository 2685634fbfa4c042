"""
Main application initialization and configuration.
"""

import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.orm import Session

from serenity.api.routes import auth, chat, community
from serenity.core.config import get_settings
from serenity.core.exceptions import SerenityError
from serenity.core.logging import configure_logging
from serenity.dependencies import db_dependency
from serenity.middleware.body_limit import setup_body_limit_middleware

logger = logging.getLogger(__name__)

# Fails fast when required settings are missing
settings = get_settings()
configure_logging(settings.log_level)

# Initialize FastAPI application
app = FastAPI(title="SerenityBot API")

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Reject oversized bodies before routing
setup_body_limit_middleware(app)

# Include routers
app.include_router(auth.router)
app.include_router(chat.router)
app.include_router(community.router)


@app.exception_handler(SerenityError)
async def serenity_error_handler(request: Request, exc: SerenityError):
    """Render application errors; server-side failures stay generic."""
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc.message}",
            exc_info=exc,
        )
        message = "Server error processing your request"
    else:
        message = exc.message

    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": message},
        headers={"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None,
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"success": False, "message": message},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"success": False, "message": "Server error"},
    )


@app.get("/")
def read_root():
    """Return a welcome message at the root endpoint."""
    return {"message": "Welcome to SerenityBot API"}


@app.get("/api/health")
def health_check(db: Session = Depends(db_dependency)):
    """Health check endpoint reporting API and database status."""
    try:
        db.execute(text("SELECT 1"))
        database = "online"
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        database = "offline"

    return {
        "status": "healthy" if database == "online" else "degraded",
        "services": {"api": "online", "database": database},
    }
