# app/core/database.py

from sqlmodel import SQLModel, create_engine
from sqlalchemy.engine import Engine
import logging


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the engine for the confessions database."""
    connect_args = {}
    if database_url.startswith("sqlite"):
        connect_args["check_same_thread"] = False  # Needed for SQLite

    logging.info(f"Connecting to database at {database_url.split('@')[-1]}")
    return create_engine(
        database_url,
        echo=echo,  # Set to True to see SQL queries
        connect_args=connect_args,
        pool_pre_ping=True,
    )


def init_db(engine: Engine) -> None:
    """Initialize the database, creating all tables."""
    # Import so the table is registered on the metadata
    from app.models import ConfessionRow  # noqa: F401

    SQLModel.metadata.create_all(engine)
