import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from app.core.config import settings, configure_logging
from app.core.database import create_db_engine, init_db
from app.core.store import ConfessionStore, InMemoryConfessionStore, SQLConfessionStore
from app.routes.confessions import router as confessions_router, validation_exception_handler


def build_store() -> ConfessionStore:
    """Create the process-wide confession store from settings."""
    if settings.IN_MEMORY_STORE:
        logging.info("Using in-memory confession store")
        return InMemoryConfessionStore()

    engine = create_db_engine(settings.DATABASE_URL)
    init_db(engine)
    return SQLConfessionStore(engine)


def create_app(store: Optional[ConfessionStore] = None):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # Shutdown
        app.state.store.close()

    # Initialize FastAPI app
    app = FastAPI(title="Confession Wall", lifespan=lifespan)

    # Configure logging
    configure_logging(settings.LOG_LEVEL)

    # Initialize the store once for the whole process
    app.state.store = store if store is not None else build_store()

    # Register routes
    app.include_router(confessions_router)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    return app
