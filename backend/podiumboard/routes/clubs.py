from typing import Any

from fastapi import APIRouter, Body, Depends
from starlette.responses import Response

from podiumboard.config import config
from podiumboard.logic.actions import create_club_action, delete_club_action, update_club_action
from podiumboard.models.actions import ActionResult
from podiumboard.models.db.club import Club
from podiumboard.routes.auth import user_authenticated
from podiumboard.routes.models import ClubsResponse
from podiumboard.routes.util import respond_with_action_result
from podiumboard.sql.clubs import get_clubs
from podiumboard.utils.id_types import ClubId, OwnerId

router = APIRouter(prefix=config.api_prefix)


@router.get("/clubs", response_model=ClubsResponse)
async def get_club_list(search: str | None = None) -> ClubsResponse:
    return ClubsResponse(data=await get_clubs(search))


@router.post("/clubs", response_model=ActionResult[Club])
async def create_club(
    response: Response,
    payload: dict[str, Any] = Body(...),
    owner_id: OwnerId = Depends(user_authenticated),
) -> ActionResult[Club]:
    return respond_with_action_result(response, await create_club_action(owner_id, payload))


@router.put("/clubs/{club_id}", response_model=ActionResult[Club])
async def update_club(
    club_id: ClubId,
    response: Response,
    payload: dict[str, Any] = Body(...),
    owner_id: OwnerId = Depends(user_authenticated),
) -> ActionResult[Club]:
    return respond_with_action_result(
        response, await update_club_action(club_id, owner_id, payload)
    )


@router.delete("/clubs/{club_id}", response_model=ActionResult[ClubId])
async def delete_club(
    club_id: ClubId,
    response: Response,
    owner_id: OwnerId = Depends(user_authenticated),
) -> ActionResult[ClubId]:
    return respond_with_action_result(response, await delete_club_action(club_id, owner_id))
