from typing import Annotated

from heliclockter import datetime_utc
from pydantic import StringConstraints

from podiumboard.models.db.shared import BaseModelORM
from podiumboard.utils.id_types import ClubId, OwnerId

ClubName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]


class ClubBody(BaseModelORM):
    name: ClubName


class ClubUpdateBody(BaseModelORM):
    name: ClubName | None = None


class ClubInsertable(ClubBody):
    owner_id: OwnerId
    created: datetime_utc
    updated: datetime_utc


class Club(ClubInsertable):
    id: ClubId
