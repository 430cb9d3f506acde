#!/usr/bin/env python3
import argparse
import asyncio
import random
from typing import Any

from podiumboard.database import database
from podiumboard.logic.actions import create_club_action, create_podium_action
from podiumboard.logic.ranking.tallies import compute_medal_tallies
from podiumboard.models.db.podium import PodiumCategory, PodiumPlace
from podiumboard.sql.clubs import get_clubs
from podiumboard.sql.podiums import get_podiums
from podiumboard.utils.id_types import ClubId, OwnerId

SAMPLE_CLUB_NAMES = [
    "Alpha Athletic",
    "Beta Rowing Club",
    "Clube Naval",
    "Delta Fencing",
    "Estrela Judo",
    "Falcons Gymnastics",
    "Grupo Desportivo Norte",
    "Harbour Swimmers",
]

FIRST_NAMES = ["Ana", "Bruno", "Carla", "Diogo", "Eva", "Filipe", "Guida", "Hugo", "Ines", "Joao"]
LAST_NAMES = ["Almeida", "Barros", "Costa", "Duarte", "Esteves", "Faria", "Gomes", "Lopes"]

POINTS_FOR_PLACE = {
    PodiumPlace.GOLD: 10,
    PodiumPlace.SILVER: 6,
    PodiumPlace.BRONZE: 3,
}


def build_sample_podium_payloads(
    club_ids: list[ClubId], podium_count: int, rng: random.Random
) -> list[dict[str, Any]]:
    payloads: list[dict[str, Any]] = []
    if len(club_ids) < 1:
        return payloads

    categories = list(PodiumCategory)
    for _ in range(podium_count):
        place = rng.choice(list(PodiumPlace))
        payloads.append(
            {
                "club_id": rng.choice(club_ids),
                "player": f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}",
                "category": rng.choice(categories).value,
                "place": place.value,
                "points": POINTS_FOR_PLACE[place],
            }
        )
    return payloads


async def seed(owner_id: OwnerId, club_count: int, podium_count: int, rng: random.Random) -> None:
    club_ids: list[ClubId] = []
    for name in SAMPLE_CLUB_NAMES[:club_count]:
        result = await create_club_action(owner_id, {"name": name})
        if not result.success or result.data is None:
            raise RuntimeError(f"Could not create club {name}: {result.error}")
        club_ids.append(result.data.id)

    for payload in build_sample_podium_payloads(club_ids, podium_count, rng):
        result = await create_podium_action(owner_id, payload)
        if not result.success:
            raise RuntimeError(f"Could not create podium {payload}: {result.error}")

    print(f"Created {len(club_ids)} clubs and {podium_count} podiums for owner {owner_id}")
    for rank, tally in enumerate(compute_medal_tallies(await get_clubs(), await get_podiums()), 1):
        print(f"{rank:>2}. {tally.club.name}: {tally.gold}G {tally.silver}S {tally.bronze}B")


async def async_main() -> None:
    parser = argparse.ArgumentParser(description="Seed sample clubs and podium results.")
    parser.add_argument("--owner-id", type=str, required=True, help="Owner of the seeded rows.")
    parser.add_argument("--clubs", type=int, default=6)
    parser.add_argument("--podiums", type=int, default=60)
    parser.add_argument("--random-seed", type=int, default=None)
    args = parser.parse_args()

    if not 1 <= args.clubs <= len(SAMPLE_CLUB_NAMES):
        raise ValueError(f"--clubs must be between 1 and {len(SAMPLE_CLUB_NAMES)}")

    await database.connect()
    try:
        await seed(
            owner_id=OwnerId(args.owner_id),
            club_count=int(args.clubs),
            podium_count=int(args.podiums),
            rng=random.Random(args.random_seed),
        )
    finally:
        await database.disconnect()


if __name__ == "__main__":
    asyncio.run(async_main())
