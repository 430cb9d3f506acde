from uuid import uuid4
from zoneinfo import ZoneInfo

from heliclockter import datetime_utc

from podiumboard.models.db.club import Club, ClubBody
from podiumboard.models.db.podium import Podium, PodiumBody, PodiumCategory, PodiumPlace
from podiumboard.utils.id_types import ClubId, OwnerId, PodiumId

DUMMY_MOCK_TIME = datetime_utc(2026, 1, 11, 4, 32, 11, tzinfo=ZoneInfo("UTC"))
DUMMY_OWNER_ID = OwnerId("9a3f0c58-42b7-4f0e-9f5e-3c1d2b7a6e01")
DUMMY_OTHER_OWNER_ID = OwnerId("0b6d2e71-5c3a-4d8e-a1f2-7e9c4b3a2d10")

DUMMY_CLUB_BODY1 = ClubBody(name="Alpha Club")
DUMMY_CLUB_BODY2 = ClubBody(name="Beta Rowing")

DUMMY_PODIUM_BODY1 = PodiumBody(
    club_id="placeholder",
    player="Ana Costa",
    category=PodiumCategory.SENIOR,
    place=PodiumPlace.GOLD,
    points=10,
)


def dummy_club(club_id: str, name: str, owner_id: OwnerId = DUMMY_OWNER_ID) -> Club:
    return Club(
        id=ClubId(club_id),
        name=name,
        owner_id=owner_id,
        created=DUMMY_MOCK_TIME,
        updated=DUMMY_MOCK_TIME,
    )


def dummy_podium(
    club_id: str,
    place: PodiumPlace,
    points: int = 1,
    category: PodiumCategory = PodiumCategory.SENIOR,
    player: str = "Sample Player",
) -> Podium:
    return Podium(
        id=PodiumId(str(uuid4())),
        club_id=club_id,
        player=player,
        category=category,
        place=place,
        points=points,
        owner_id=DUMMY_OWNER_ID,
        created=DUMMY_MOCK_TIME,
        updated=DUMMY_MOCK_TIME,
    )
