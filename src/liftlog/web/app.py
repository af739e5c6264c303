"""FastAPI application for liftlog."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..db import KeyValueStore
from ..db.engine import get_db_path, init_db
from ..stats import StatsCalculator
from .routers import weights, workouts


def create_app(store: KeyValueStore | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Storage backend; defaults to the SQLite database
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Initialize the database on startup."""
        if store is None:
            db_path = get_db_path()
            if not db_path.exists():
                await init_db(db_path)
        yield

    app = FastAPI(
        title="liftlog",
        description="Personal weight and workout routine tracker",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Shared by routers
    app.state.store = store
    app.state.stats_calculator = StatsCalculator()

    app.include_router(workouts.router)
    app.include_router(weights.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": "0.1.0"}

    return app
