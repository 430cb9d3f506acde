from pydantic import BaseModel

from podiumboard.models.db.club import Club
from podiumboard.models.db.podium import Podium
from podiumboard.models.leaderboard import (
    ClubMedalTally,
    ClubPointsTally,
    LeaderboardView,
    PodiumWithClub,
)


class DataResponse[DataT](BaseModel):
    data: DataT


class ClubsResponse(DataResponse[list[Club]]):
    pass


class PodiumsResponse(DataResponse[list[PodiumWithClub]]):
    pass


class MedalTalliesResponse(DataResponse[list[ClubMedalTally]]):
    pass


class PointsTalliesResponse(DataResponse[list[ClubPointsTally]]):
    pass


class LeaderboardResponse(DataResponse[LeaderboardView]):
    pass


class WebhookClubResponse(BaseModel):
    success: bool = True
    club: Club
    message: str = "Club created successfully"


class WebhookPodiumResponse(BaseModel):
    success: bool = True
    podium: Podium
    message: str = "Podium created successfully"
