from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from starlette import status

from podiumboard.config import config
from podiumboard.logic.actions import create_club_action, create_podium_action
from podiumboard.models.actions import ActionResult
from podiumboard.models.db.club import ClubBody
from podiumboard.models.db.podium import PodiumBody
from podiumboard.routes.auth import webhook_authenticated
from podiumboard.routes.models import WebhookClubResponse, WebhookPodiumResponse
from podiumboard.utils.errors import ValidationError, validated
from podiumboard.utils.id_types import OwnerId
from podiumboard.utils.types import assert_some

router = APIRouter(prefix=config.api_prefix)


def _validation_failed(exc: ValidationError) -> HTTPException:
    return HTTPException(
        status.HTTP_400_BAD_REQUEST,
        {"error": "Validation failed", "details": exc.details},
    )


def _raise_for_failed_result(result: ActionResult[Any]) -> None:
    if not result.success:
        raise HTTPException(result.status_code, result.error)


@router.post(
    "/api/clubs/create",
    status_code=status.HTTP_201_CREATED,
    response_model=WebhookClubResponse,
)
async def create_club_webhook(
    payload: dict[str, Any] = Body(...),
    owner_id: OwnerId = Depends(webhook_authenticated),
) -> WebhookClubResponse:
    try:
        club_body = validated(ClubBody, payload)
    except ValidationError as exc:
        raise _validation_failed(exc) from exc

    result = await create_club_action(owner_id, club_body)
    _raise_for_failed_result(result)
    return WebhookClubResponse(club=assert_some(result.data))


@router.post(
    "/api/podiums/create",
    status_code=status.HTTP_201_CREATED,
    response_model=WebhookPodiumResponse,
)
async def create_podium_webhook(
    payload: dict[str, Any] = Body(...),
    owner_id: OwnerId = Depends(webhook_authenticated),
) -> WebhookPodiumResponse:
    try:
        podium_body = validated(PodiumBody, payload)
    except ValidationError as exc:
        raise _validation_failed(exc) from exc

    result = await create_podium_action(owner_id, podium_body)
    _raise_for_failed_result(result)
    return WebhookPodiumResponse(podium=assert_some(result.data))
