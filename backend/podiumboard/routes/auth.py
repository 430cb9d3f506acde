import secrets

from fastapi import Header, HTTPException
from starlette import status

from podiumboard.config import config
from podiumboard.utils.id_types import OwnerId
from podiumboard.utils.logging import logger


async def user_authenticated(x_user_id: str | None = Header(default=None)) -> OwnerId:
    """
    Resolve the current user.

    Authentication happens in the identity provider in front of this service, which forwards
    the id of the signed-in user in the ``x-user-id`` header.
    """
    if x_user_id is None or x_user_id.strip() == "":
        raise HTTPException(
            status.HTTP_401_UNAUTHORIZED,
            "Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return OwnerId(x_user_id.strip())


def api_secret_is_valid(provided_secret: str | None) -> bool:
    if config.api_secret is None or provided_secret is None:
        return False
    return secrets.compare_digest(provided_secret.encode(), config.api_secret.encode())


async def webhook_authenticated(x_api_secret: str | None = Header(default=None)) -> OwnerId:
    if not api_secret_is_valid(x_api_secret):
        logger.warning("Rejected webhook call with a missing or invalid API secret")
        raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Unauthorized - Invalid API secret")

    # TODO: map webhook callers to their own owners once callers get individual secrets.
    return OwnerId(config.webhook_owner_id)
