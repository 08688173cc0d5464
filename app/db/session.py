from typing import Generator
import logging

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from app.core.config import Settings

logger = logging.getLogger("app")

# Base class for all SQLAlchemy models
Base = declarative_base()

def create_db_engine(settings: Settings) -> Engine:
    """Create the database engine with a connection pool"""
    if not settings.DATABASE_URL:
        logger.error("DATABASE_URL is not set or empty!")
        raise ValueError("DATABASE_URL environment variable is required")

    connect_args = {}
    if settings.DATABASE_URL.startswith("sqlite"):
        connect_args["check_same_thread"] = False

    try:
        engine = create_engine(
            settings.DATABASE_URL,
            pool_pre_ping=True,  # Check connection before using from pool
            pool_recycle=3600,   # Recycle connections after 1 hour
            connect_args=connect_args,
        )
        logger.info("Database engine created successfully")
    except Exception as e:
        logger.error(f"Failed to create database engine: {e}")
        raise
    return engine

def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    One session per request, taken from the factory the application was
    built with, and closed once the response has been produced.
    """
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
