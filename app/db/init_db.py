import logging

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

from app.db.base import Base

logger = logging.getLogger("app")


def create_all_tables(engine: Engine) -> None:
    """Create any missing tables; existing tables are left untouched"""
    try:
        existing_tables = set(inspect(engine).get_table_names())

        Base.metadata.create_all(bind=engine)

        new_tables = set(inspect(engine).get_table_names()) - existing_tables
        if new_tables:
            logger.info(f"Created new tables: {sorted(new_tables)}")
    except Exception as e:
        logger.error(f"Error creating database tables: {e}")
        raise


if __name__ == "__main__":
    from app.core.config import get_settings
    from app.db.session import create_db_engine

    logging.basicConfig(level=logging.INFO)
    logger.info("Creating database tables")
    create_all_tables(create_db_engine(get_settings()))
    logger.info("Database tables created")
