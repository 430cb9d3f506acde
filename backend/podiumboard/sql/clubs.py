from uuid import uuid4

from heliclockter import datetime_utc

from podiumboard.database import database
from podiumboard.models.db.club import Club, ClubBody, ClubInsertable, ClubUpdateBody
from podiumboard.schema import clubs
from podiumboard.utils.db import fetch_all_parsed, fetch_one_parsed
from podiumboard.utils.errors import NotFoundError, validated
from podiumboard.utils.id_types import ClubId, OwnerId
from podiumboard.utils.logging import logger
from podiumboard.utils.types import assert_some


async def get_clubs(name_substring: str | None = None) -> list[Club]:
    query = clubs.select().order_by(clubs.c.created, clubs.c.id)
    if name_substring is not None and name_substring.strip() != "":
        query = query.where(clubs.c.name.icontains(name_substring, autoescape=True))

    return await fetch_all_parsed(database, Club, query)


async def get_club_by_id(club_id: ClubId, owner_id: OwnerId | None = None) -> Club | None:
    condition = clubs.c.id == club_id
    if owner_id is not None:
        condition = condition & (clubs.c.owner_id == owner_id)

    return await fetch_one_parsed(database, Club, clubs.select().where(condition))


async def get_owned_club_or_raise(club_id: ClubId, owner_id: OwnerId) -> Club:
    club = await get_club_by_id(club_id, owner_id=owner_id)
    if club is None:
        raise NotFoundError("Club not found")
    return club


async def sql_create_club(owner_id: OwnerId, club_body: ClubBody) -> Club:
    club_id = ClubId(str(uuid4()))
    now = datetime_utc.now()
    await database.execute(
        query=clubs.insert(),
        values={
            "id": club_id,
            **ClubInsertable(
                **club_body.model_dump(),
                owner_id=owner_id,
                created=now,
                updated=now,
            ).model_dump(),
        },
    )
    logger.info("Created club %s for owner %s", club_id, owner_id)
    return assert_some(await get_club_by_id(club_id))


async def sql_update_club(club_id: ClubId, owner_id: OwnerId, club_update: ClubUpdateBody) -> Club:
    existing = await get_owned_club_or_raise(club_id, owner_id)
    merged = validated(
        ClubBody,
        {
            **existing.model_dump(include=set(ClubBody.model_fields)),
            **club_update.model_dump(exclude_unset=True),
        },
    )

    # Owner-scoped so a row deleted since the lookup above is reported as missing.
    updated = await fetch_one_parsed(
        database,
        Club,
        clubs.update()
        .where((clubs.c.id == club_id) & (clubs.c.owner_id == owner_id))
        .values(**merged.model_dump(), updated=datetime_utc.now())
        .returning(*clubs.c),
    )
    if updated is None:
        raise NotFoundError("Club not found")
    return updated


async def sql_delete_club(club_id: ClubId, owner_id: OwnerId) -> ClubId:
    deleted = await database.fetch_one(
        clubs.delete()
        .where((clubs.c.id == club_id) & (clubs.c.owner_id == owner_id))
        .returning(clubs.c.id)
    )
    if deleted is None:
        raise NotFoundError("Club not found")
    logger.info("Deleted club %s for owner %s", club_id, owner_id)
    return club_id
