from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.engine import Engine

from app.core.config import Settings, get_settings
from app.core.errors import register_exception_handlers
from app.db.init_db import create_all_tables
from app.db.session import create_db_engine, create_session_factory
from app.middleware.request_logging import RequestLoggingMiddleware
from app.middleware.auth_logging import AuthLoggingMiddleware
from app.modules.auth.api.router import router as auth_router
from app.modules.user_management.api.router import router as user_router
from app.modules.subscriptions.api.router import router as subscriptions_router
from app.modules.posts.api.router import router as posts_router
from app.modules.posts.likes.api.router import router as likes_router
from app.modules.posts.comments.api.router import router as comments_router
from app.modules.follows.api.router import router as follows_router

logger = logging.getLogger("app")

@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(f"Starting server in {settings.ENVIRONMENT} mode")

    create_all_tables(app.state.engine)
    yield

    app.state.engine.dispose()
    logger.info("Database engine disposed")

def create_app(settings: Optional[Settings] = None, engine: Optional[Engine] = None) -> FastAPI:
    """
    Build the application around an explicit settings object and database engine.
    Both default to the environment configuration.
    """
    settings = settings or get_settings()

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title=settings.PROJECT_NAME,
        debug=settings.DEBUG,
        description="Posts, likes, comments and a follow graph for a small social network",
        version=settings.VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    engine = engine or create_db_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)

    register_exception_handlers(app)

    # Add middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(AuthLoggingMiddleware)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Uploaded images are served straight from disk
    Path(settings.UPLOAD_DIRECTORY).mkdir(parents=True, exist_ok=True)
    app.mount(settings.UPLOAD_URL_PREFIX, StaticFiles(directory=settings.UPLOAD_DIRECTORY), name="uploads")

    # Register API routers
    app.include_router(auth_router, tags=["authentication"])
    app.include_router(user_router, tags=["users"])
    app.include_router(subscriptions_router, tags=["subscriptions"])
    app.include_router(posts_router, tags=["posts"])
    app.include_router(likes_router, tags=["likes"])
    app.include_router(comments_router, tags=["comments"])
    app.include_router(follows_router, tags=["follows"])

    @app.get("/")
    async def root():
        return {
            "message": f"Welcome to {settings.PROJECT_NAME}",
            "version": settings.VERSION,
            "environment": settings.ENVIRONMENT,
            "documentation": "/docs" if settings.DEBUG else None,
        }

    return app
