# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

# Local application imports
from .api.v1 import auth_router, admin_router
from .application.dto.validation import describe_validation_errors
from .core.config import get_settings
from .di.container import get_container
from .infrastructure.db.mongo_connection import close_database, ensure_user_indexes

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Creates the user collection indexes on startup and closes the MongoDB
    client on shutdown.
    """
    try:
        await ensure_user_indexes(get_container().get("user_collection"))
    except Exception as e:
        # Don't fail app startup if MongoDB is temporarily unavailable
        logger.error(f"Failed to ensure user indexes: {e}", exc_info=True)

    yield

    close_database()
    logger.info("Application shutdown complete")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors in the {success, message} envelope used by every endpoint"""
    message = exc.detail
    if exc.status_code == 404 and message == "Not Found":
        message = "Route not found"
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": message},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={"success": False, "message": describe_validation_errors(exc.errors())},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": "Something went wrong!"},
    )


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - CORS middleware configuration
    - Error envelope handlers
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    application = FastAPI(
        title="Account Approval API",
        version=API_VERSION,
        description="User registration and admin approval backend",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=get_settings().cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.add_exception_handler(StarletteHTTPException, http_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unhandled_exception_handler)

    application.include_router(auth_router, prefix="/api/auth")
    application.include_router(admin_router, prefix="/api/admin")

    @application.get("/")
    async def home() -> dict:
        return {
            "message": "Authentication API is running",
            "version": API_VERSION,
            "endpoints": {
                "auth": "/api/auth",
                "admin": "/api/admin",
            },
        }

    return application


# Create application instance
app = create_application()
