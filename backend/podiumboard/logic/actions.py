from collections.abc import Awaitable, Callable
from typing import Any

from starlette import status

from podiumboard.logic.live import LiveRowSet, live_clubs, live_podiums
from podiumboard.models.actions import ActionResult
from podiumboard.models.db.club import Club, ClubBody, ClubUpdateBody
from podiumboard.models.db.podium import Podium, PodiumBody, PodiumUpdateBody
from podiumboard.sql.clubs import sql_create_club, sql_delete_club, sql_update_club
from podiumboard.sql.podiums import sql_create_podium, sql_delete_podium, sql_update_podium
from podiumboard.utils.errors import PodiumboardError, validated
from podiumboard.utils.id_types import ClubId, OwnerId, PodiumId
from podiumboard.utils.logging import logger


async def run_action[DataT](
    description: str,
    operation: Callable[[], Awaitable[DataT]],
    feed: LiveRowSet[Any],
    *,
    success_status: int = status.HTTP_200_OK,
) -> ActionResult[DataT]:
    """
    Run one owner-scoped mutation and fold store errors into an ``ActionResult``.

    Only our own errors are folded; anything else is a bug and propagates. Subscribers of
    ``feed`` are notified after the mutation succeeded.
    """
    try:
        data = await operation()
    except PodiumboardError as exc:
        logger.warning("Failed to %s: %s", description, exc.message)
        return ActionResult(success=False, error=exc.message, status_code=exc.status_code)

    await feed.publish()
    return ActionResult(success=True, data=data, status_code=success_status)


async def create_club_action(owner_id: OwnerId, payload: object) -> ActionResult[Club]:
    async def create() -> Club:
        return await sql_create_club(owner_id, validated(ClubBody, payload))

    return await run_action(
        "create club", create, live_clubs, success_status=status.HTTP_201_CREATED
    )


async def update_club_action(
    club_id: ClubId, owner_id: OwnerId, payload: object
) -> ActionResult[Club]:
    async def update() -> Club:
        return await sql_update_club(club_id, owner_id, validated(ClubUpdateBody, payload))

    return await run_action("update club", update, live_clubs)


async def delete_club_action(club_id: ClubId, owner_id: OwnerId) -> ActionResult[ClubId]:
    async def delete() -> ClubId:
        return await sql_delete_club(club_id, owner_id)

    return await run_action("delete club", delete, live_clubs)


async def create_podium_action(owner_id: OwnerId, payload: object) -> ActionResult[Podium]:
    async def create() -> Podium:
        return await sql_create_podium(owner_id, validated(PodiumBody, payload))

    return await run_action(
        "create podium", create, live_podiums, success_status=status.HTTP_201_CREATED
    )


async def update_podium_action(
    podium_id: PodiumId, owner_id: OwnerId, payload: object
) -> ActionResult[Podium]:
    async def update() -> Podium:
        return await sql_update_podium(podium_id, owner_id, validated(PodiumUpdateBody, payload))

    return await run_action("update podium", update, live_podiums)


async def delete_podium_action(podium_id: PodiumId, owner_id: OwnerId) -> ActionResult[PodiumId]:
    async def delete() -> PodiumId:
        return await sql_delete_podium(podium_id, owner_id)

    return await run_action("delete podium", delete, live_podiums)
