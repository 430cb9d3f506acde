from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class BaseModelORM(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    @field_validator("*", mode="before")
    @classmethod
    def assume_utc_for_naive_datetimes(cls, value: Any) -> Any:
        # Some drivers (sqlite) hand back naive datetimes for timezone-aware columns.
        if isinstance(value, datetime) and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
