import pytest

from podiumboard.logic.actions import (
    create_club_action,
    create_podium_action,
    delete_club_action,
    update_podium_action,
)
from podiumboard.logic.live import live_clubs
from podiumboard.logic.ranking.live_leaderboard import LiveLeaderboard
from podiumboard.models.db.club import Club
from podiumboard.models.leaderboard import LeaderboardView
from podiumboard.schema import clubs, podiums
from podiumboard.utils.dummy_records import DUMMY_OTHER_OWNER_ID, DUMMY_OWNER_ID
from tests.integration_tests.sql import assert_row_count_and_clear


def _podium_payload(club_id: str, place: str, points: int) -> dict[str, object]:
    return {
        "clubId": club_id,
        "player": f"Player {place}",
        "category": "SENIOR",
        "place": place,
        "points": points,
    }


@pytest.mark.asyncio(loop_scope="session")
async def test_club_feed_delivers_rows_after_actions() -> None:
    deliveries: list[list[Club]] = []
    unsubscribe = live_clubs.subscribe(deliveries.append)
    try:
        created = await create_club_action(DUMMY_OWNER_ID, {"name": "Alpha Club"})
        assert created.success and created.data is not None

        rejected = await delete_club_action(created.data.id, DUMMY_OTHER_OWNER_ID)
        deleted = await delete_club_action(created.data.id, DUMMY_OWNER_ID)
    finally:
        unsubscribe()

    assert rejected.success is False
    assert rejected.error == "Club not found"
    assert deleted.success is True
    assert [[club.name for club in rows] for rows in deliveries] == [["Alpha Club"], []]
    await assert_row_count_and_clear(clubs, 0)


@pytest.mark.asyncio(loop_scope="session")
async def test_live_leaderboard_follows_store_changes() -> None:
    views: list[LeaderboardView] = []
    leaderboard = LiveLeaderboard(views.append)
    try:
        await leaderboard.start()
        alpha = await create_club_action(DUMMY_OWNER_ID, {"name": "Alpha Club"})
        beta = await create_club_action(DUMMY_OWNER_ID, {"name": "Beta"})
        assert alpha.data is not None and beta.data is not None

        await create_podium_action(DUMMY_OWNER_ID, _podium_payload(alpha.data.id, "1", 10))
        await create_podium_action(DUMMY_OWNER_ID, _podium_payload(alpha.data.id, "3", 4))
        await create_podium_action(DUMMY_OWNER_ID, _podium_payload(beta.data.id, "1", 10))
        beta_bronze = await create_podium_action(
            DUMMY_OWNER_ID, _podium_payload(beta.data.id, "3", 7)
        )
        assert beta_bronze.data is not None
        await update_podium_action(beta_bronze.data.id, DUMMY_OWNER_ID, {"place": "2"})
        await create_podium_action(DUMMY_OWNER_ID, _podium_payload("missing-club", "1", 10))
    finally:
        leaderboard.close()

    latest = views[-1]
    assert [(tally.club.name, tally.medal_key) for tally in latest.medals] == [
        ("Beta", (1, 1, 0)),
        ("Alpha Club", (1, 0, 1)),
    ]
    assert [(tally.club.name, tally.points) for tally in latest.points] == [
        ("Beta", 17),
        ("Alpha Club", 14),
    ]
    # One view on start, then one per successful mutation.
    assert len(views) == 9
    await assert_row_count_and_clear(podiums, 5)
    await assert_row_count_and_clear(clubs, 2)
