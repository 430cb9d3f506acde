from collections.abc import AsyncIterator

import pytest_asyncio
from sqlalchemy import create_engine

from podiumboard.config import config
from podiumboard.database import database
from podiumboard.schema import metadata


@pytest_asyncio.fixture(scope="session", loop_scope="session", autouse=True)
async def connected_database() -> AsyncIterator[None]:
    engine = create_engine(config.database_url)
    metadata.create_all(engine)
    await database.connect()
    try:
        yield
    finally:
        await database.disconnect()
        metadata.drop_all(engine)
        engine.dispose()
