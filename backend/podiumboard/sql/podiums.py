from typing import Any
from uuid import uuid4

from heliclockter import datetime_utc
from sqlalchemy import select

from podiumboard.database import database
from podiumboard.models.db.podium import (
    Podium,
    PodiumBody,
    PodiumCategory,
    PodiumInsertable,
    PodiumUpdateBody,
)
from podiumboard.models.leaderboard import PodiumWithClub
from podiumboard.schema import clubs, podiums
from podiumboard.utils.db import fetch_all_parsed, fetch_one_parsed
from podiumboard.utils.errors import NotFoundError, validated
from podiumboard.utils.id_types import OwnerId, PodiumId
from podiumboard.utils.logging import logger
from podiumboard.utils.types import assert_some


def _to_row_values(podium_body: PodiumBody) -> dict[str, Any]:
    # The Enum columns are declared with plain string values, not the python enums.
    return {
        **podium_body.model_dump(),
        "category": podium_body.category.value,
        "place": podium_body.place.value,
    }


async def get_podiums(
    player_substring: str | None = None,
    category: PodiumCategory | None = None,
) -> list[Podium]:
    query = podiums.select().order_by(podiums.c.created, podiums.c.id)
    if player_substring is not None and player_substring.strip() != "":
        query = query.where(podiums.c.player.icontains(player_substring, autoescape=True))
    if category is not None:
        query = query.where(podiums.c.category == category.value)

    return await fetch_all_parsed(database, Podium, query)


async def get_podiums_with_clubs(player_substring: str | None = None) -> list[PodiumWithClub]:
    query = (
        select(podiums, clubs.c.name.label("club_name"))
        .select_from(podiums.outerjoin(clubs, clubs.c.id == podiums.c.club_id))
        .order_by(podiums.c.created, podiums.c.id)
    )
    if player_substring is not None and player_substring.strip() != "":
        query = query.where(podiums.c.player.icontains(player_substring, autoescape=True))

    return await fetch_all_parsed(database, PodiumWithClub, query)


async def get_podium_by_id(podium_id: PodiumId, owner_id: OwnerId | None = None) -> Podium | None:
    condition = podiums.c.id == podium_id
    if owner_id is not None:
        condition = condition & (podiums.c.owner_id == owner_id)

    return await fetch_one_parsed(database, Podium, podiums.select().where(condition))


async def get_owned_podium_or_raise(podium_id: PodiumId, owner_id: OwnerId) -> Podium:
    podium = await get_podium_by_id(podium_id, owner_id=owner_id)
    if podium is None:
        raise NotFoundError("Podium not found")
    return podium


async def sql_create_podium(owner_id: OwnerId, podium_body: PodiumBody) -> Podium:
    podium_id = PodiumId(str(uuid4()))
    now = datetime_utc.now()
    await database.execute(
        query=podiums.insert(),
        values={
            "id": podium_id,
            **PodiumInsertable(
                **podium_body.model_dump(),
                owner_id=owner_id,
                created=now,
                updated=now,
            ).model_dump(),
            **_to_row_values(podium_body),
        },
    )
    logger.info("Created podium %s for club %s", podium_id, podium_body.club_id)
    return assert_some(await get_podium_by_id(podium_id))


async def sql_update_podium(
    podium_id: PodiumId, owner_id: OwnerId, podium_update: PodiumUpdateBody
) -> Podium:
    existing = await get_owned_podium_or_raise(podium_id, owner_id)
    merged = validated(
        PodiumBody,
        {
            **existing.model_dump(include=set(PodiumBody.model_fields)),
            **podium_update.model_dump(exclude_unset=True),
        },
    )

    updated = await fetch_one_parsed(
        database,
        Podium,
        podiums.update()
        .where((podiums.c.id == podium_id) & (podiums.c.owner_id == owner_id))
        .values(**_to_row_values(merged), updated=datetime_utc.now())
        .returning(*podiums.c),
    )
    if updated is None:
        raise NotFoundError("Podium not found")
    return updated


async def sql_delete_podium(podium_id: PodiumId, owner_id: OwnerId) -> PodiumId:
    deleted = await database.fetch_one(
        podiums.delete()
        .where((podiums.c.id == podium_id) & (podiums.c.owner_id == owner_id))
        .returning(podiums.c.id)
    )
    if deleted is None:
        raise NotFoundError("Podium not found")
    logger.info("Deleted podium %s for owner %s", podium_id, owner_id)
    return podium_id
