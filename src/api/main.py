"""
Command bridge application.

The game server posts each /register invocation here and relays the
returned chat lines to the sender.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

tags_metadata = [
    {
        "name": "v1",
        "description": "Player registration bridge v1 - Run in-game registration commands",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the account database for the lifetime of the app."""
    settings = get_settings()

    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )
    run_migrations(pool)
    app.state.pool = pool

    logger.info(
        "Accepting /register commands (registration type: %s, hash: %s)",
        settings.registration_type.value,
        settings.password_hash.value,
    )

    yield

    pool.close()
    logger.info("Account database pool closed")


app = FastAPI(
    title="playerauth",
    description="Player registration bridge - Decides and performs in-game /register commands",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str]:
    """Report healthy once the account database answers."""
    with request.app.state.pool.connection() as conn:
        conn.execute("SELECT 1")

    return {"status": "healthy"}
