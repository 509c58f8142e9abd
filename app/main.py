"""
90s America - Main FastAPI Application

Nostalgia API serving:
- Static 90s content (movies, music, trends)
- Anonymous chat log stored in MongoDB
- Image gallery backed by the MongoDB ``images`` collection
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
import sys

from app.utils.config import get_settings
from app.utils.frontend import register_frontend
from app.utils.mongo_client import MongoConnection
from app.utils.stores import Datastore
from app.api import health, nineties, chat, images


# Configure logging
logger.remove()
logger.add(
    sys.stdout,
    format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    level=get_settings().log_level
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    settings = get_settings()
    logger.info(f"Starting {settings.api_title} v{settings.api_version} ({settings.node_env})")

    # A failed connection leaves the static content available
    connection = None
    if settings.mongodb_uri:
        connection = MongoConnection()
        try:
            await connection.connect()
            app.state.datastore = Datastore.from_database(connection.database)
            logger.success("Image gallery and chat enabled")
        except Exception as e:
            logger.error(f"MongoDB connection failed: {e}")
            connection.close()
            connection = None
    else:
        logger.warning("MongoDB URI not provided - image and chat features disabled")

    yield

    # Cleanup
    logger.info("Shutting down application...")
    app.state.datastore = None
    if connection is not None:
        connection.close()
    logger.success("Application shut down complete")


def create_app() -> FastAPI:
    """Build the application with all routes registered."""
    settings = get_settings()
    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description="Movies, music, trends, chat and images from the 90s",
        lifespan=lifespan
    )
    app.state.datastore = None

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(status_code=exc.status_code, content={"error": str(exc.detail)})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
        )
        return JSONResponse(status_code=400, content={"error": f"Invalid request: {problems}"})

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler."""
        logger.error(f"Unhandled exception: {exc}")
        content = {"error": "Internal server error"}
        if settings.log_level == "DEBUG":
            content["detail"] = str(exc)
        return JSONResponse(status_code=500, content=content)

    # Include routers
    app.include_router(health.router, tags=["Health"])
    app.include_router(chat.router, prefix="/api/90s/chat", tags=["Chat"])
    app.include_router(images.router, prefix="/api/90s/images", tags=["Images"])
    app.include_router(nineties.router, prefix="/api/90s", tags=["Nineties"])

    register_frontend(app, settings)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=not settings.is_production,
        log_level=settings.log_level.lower()
    )
