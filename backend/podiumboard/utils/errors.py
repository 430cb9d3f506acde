from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from starlette import status


class PodiumboardError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(PodiumboardError):
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str, details: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.details = details or []


class NotFoundError(PodiumboardError):
    status_code = status.HTTP_404_NOT_FOUND


class AuthorizationError(PodiumboardError):
    status_code = status.HTTP_401_UNAUTHORIZED


def _describe_errors(exc: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]


def validated[ModelT: BaseModel](model: type[ModelT], payload: object) -> ModelT:
    """
    Build ``model`` from untrusted input.

    Every row that enters the store goes through here, so callers only ever see our own
    ``ValidationError`` instead of pydantic's.
    """
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        details = _describe_errors(exc)
        summary = "; ".join(f"{detail['field']}: {detail['message']}" for detail in details)
        raise ValidationError(f"Validation failed: {summary}", details) from exc
