from pydantic import BaseModel, field_validator

from podiumboard.models.db.club import Club
from podiumboard.models.db.podium import Podium, PodiumCategory


class LeaderboardFilters(BaseModel):
    name_substring: str | None = None
    category: PodiumCategory | None = None

    @field_validator("name_substring", mode="before")
    @classmethod
    def blank_search_means_no_filter(cls, value: object) -> object:
        if isinstance(value, str) and value.strip() == "":
            return None
        return value


class ClubMedalTally(BaseModel):
    club: Club
    gold: int = 0
    silver: int = 0
    bronze: int = 0

    @property
    def medal_key(self) -> tuple[int, int, int]:
        return self.gold, self.silver, self.bronze


class ClubPointsTally(BaseModel):
    club: Club
    points: int = 0


class LeaderboardView(BaseModel):
    medals: list[ClubMedalTally]
    points: list[ClubPointsTally]


class PodiumWithClub(Podium):
    club_name: str | None = None
