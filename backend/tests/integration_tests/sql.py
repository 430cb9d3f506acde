from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import Table

from podiumboard.database import database
from podiumboard.models.db.club import Club, ClubBody
from podiumboard.models.db.podium import Podium, PodiumBody
from podiumboard.schema import clubs, podiums
from podiumboard.sql.clubs import sql_create_club
from podiumboard.sql.podiums import sql_create_podium
from podiumboard.utils.dummy_records import DUMMY_OWNER_ID
from podiumboard.utils.id_types import OwnerId


async def assert_row_count_and_clear(table: Table, expected_rows: int) -> None:
    assert len(await database.fetch_all(query=table.select())) == expected_rows
    await database.execute(query=table.delete())


async def _delete_by_id(table: Table, row_id: Any) -> None:
    await database.execute(query=table.delete().where(table.c.id == row_id))


@asynccontextmanager
async def inserted_club(
    club_body: ClubBody, owner_id: OwnerId = DUMMY_OWNER_ID
) -> AsyncIterator[Club]:
    club = await sql_create_club(owner_id, club_body)
    try:
        yield club
    finally:
        await _delete_by_id(clubs, club.id)


@asynccontextmanager
async def inserted_podium(
    podium_body: PodiumBody, owner_id: OwnerId = DUMMY_OWNER_ID
) -> AsyncIterator[Podium]:
    podium = await sql_create_podium(owner_id, podium_body)
    try:
        yield podium
    finally:
        await _delete_by_id(podiums, podium.id)
