from enum import Enum, auto
from typing import Annotated

from heliclockter import datetime_utc
from pydantic import AliasChoices, Field, StringConstraints

from podiumboard.models.db.shared import BaseModelORM
from podiumboard.utils.id_types import OwnerId, PodiumId
from podiumboard.utils.types import EnumAutoStr

PlayerName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
ClubReference = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Points = Annotated[int, Field(ge=1, strict=True)]


class PodiumCategory(EnumAutoStr):
    U11 = auto()
    U13 = auto()
    U15 = auto()
    U17 = auto()
    U20 = auto()
    SENIOR = auto()
    VETERAN = auto()


class PodiumPlace(str, Enum):
    GOLD = "1"
    SILVER = "2"
    BRONZE = "3"


class PodiumBody(BaseModelORM):
    club_id: ClubReference = Field(validation_alias=AliasChoices("club_id", "clubId"))
    player: PlayerName
    category: PodiumCategory
    place: PodiumPlace
    points: Points


class PodiumUpdateBody(BaseModelORM):
    club_id: ClubReference | None = Field(
        default=None, validation_alias=AliasChoices("club_id", "clubId")
    )
    player: PlayerName | None = None
    category: PodiumCategory | None = None
    place: PodiumPlace | None = None
    points: Points | None = None


class PodiumInsertable(PodiumBody):
    owner_id: OwnerId
    created: datetime_utc
    updated: datetime_utc


class Podium(PodiumInsertable):
    id: PodiumId
