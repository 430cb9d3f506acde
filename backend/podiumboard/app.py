from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from podiumboard.config import config, environment
from podiumboard.database import database
from podiumboard.routes import clubs, leaderboard, podiums, webhooks
from podiumboard.utils.alembic import alembic_run_migrations
from podiumboard.utils.logging import logger


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    if config.auto_run_migrations:
        alembic_run_migrations()

    await database.connect()
    logger.info("Started podiumboard in %s mode", environment.value)
    yield

    await database.disconnect()


routers = {
    "Clubs": clubs.router,
    "Podiums": podiums.router,
    "Leaderboard": leaderboard.router,
    "Webhooks": webhooks.router,
}

app = FastAPI(
    title="Podiumboard API",
    docs_url="/docs",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origin_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/ping", summary="Healthcheck ping", tags=["Internals"])
async def ping() -> str:
    return "ping"


for tag, router in routers.items():
    app.include_router(router, tags=[tag])
