from typing import Any

from fastapi import APIRouter, Body, Depends
from starlette.responses import Response

from podiumboard.config import config
from podiumboard.logic.actions import (
    create_podium_action,
    delete_podium_action,
    update_podium_action,
)
from podiumboard.models.actions import ActionResult
from podiumboard.models.db.podium import Podium, PodiumCategory
from podiumboard.routes.auth import user_authenticated
from podiumboard.routes.models import PodiumsResponse
from podiumboard.routes.util import respond_with_action_result
from podiumboard.sql.podiums import get_podiums_with_clubs
from podiumboard.utils.id_types import OwnerId, PodiumId

router = APIRouter(prefix=config.api_prefix)


@router.get("/podiums", response_model=PodiumsResponse)
async def get_podium_list(
    search: str | None = None, category: PodiumCategory | None = None
) -> PodiumsResponse:
    podiums = await get_podiums_with_clubs(search)
    if category is not None:
        podiums = [podium for podium in podiums if podium.category == category]
    return PodiumsResponse(data=podiums)


@router.post("/podiums", response_model=ActionResult[Podium])
async def create_podium(
    response: Response,
    payload: dict[str, Any] = Body(...),
    owner_id: OwnerId = Depends(user_authenticated),
) -> ActionResult[Podium]:
    return respond_with_action_result(response, await create_podium_action(owner_id, payload))


@router.put("/podiums/{podium_id}", response_model=ActionResult[Podium])
async def update_podium(
    podium_id: PodiumId,
    response: Response,
    payload: dict[str, Any] = Body(...),
    owner_id: OwnerId = Depends(user_authenticated),
) -> ActionResult[Podium]:
    return respond_with_action_result(
        response, await update_podium_action(podium_id, owner_id, payload)
    )


@router.delete("/podiums/{podium_id}", response_model=ActionResult[PodiumId])
async def delete_podium(
    podium_id: PodiumId,
    response: Response,
    owner_id: OwnerId = Depends(user_authenticated),
) -> ActionResult[PodiumId]:
    return respond_with_action_result(response, await delete_podium_action(podium_id, owner_id))
