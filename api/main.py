"""FastAPI application for the AI Caddie API."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import Settings
from api.sessions import RoundRegistry
from database.connection import db
from database.db_manager import DatabaseManager
from database.store import InMemoryClubSetStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Pick the club store, open the DB pool if configured."""
        app.state.rounds = RoundRegistry()
        if settings.database_url:
            await db.initialize(dsn=settings.database_url)
            app.state.club_store = DatabaseManager(db.pool).clubs
            logger.info("Club sets stored in PostgreSQL")
        else:
            app.state.club_store = InMemoryClubSetStore()
            logger.info("DATABASE_URL not set, club sets kept in memory")
        yield
        await db.close()

    app = FastAPI(
        title="AI Caddie API",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from api.routers import clubs, rounds
    app.include_router(clubs.router, prefix="/api/clubs", tags=["clubs"])
    app.include_router(rounds.router, prefix="/api/rounds", tags=["rounds"])

    @app.get("/api/health")
    async def health():
        if not db.is_initialized:
            return {"status": "ok", "database": None}
        healthy = await db.health_check()
        return {"status": "ok" if healthy else "degraded", "database": healthy}

    return app


app = create_app()
