from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from podiumboard.config import config
from podiumboard.logic.ranking.live_leaderboard import LiveLeaderboard
from podiumboard.logic.ranking.tallies import (
    compute_leaderboard,
    compute_medal_tallies,
    compute_points_tallies,
)
from podiumboard.models.db.podium import PodiumCategory
from podiumboard.models.leaderboard import LeaderboardFilters, LeaderboardView
from podiumboard.routes.models import (
    LeaderboardResponse,
    MedalTalliesResponse,
    PointsTalliesResponse,
)
from podiumboard.sql.clubs import get_clubs
from podiumboard.sql.podiums import get_podiums
from podiumboard.utils.logging import logger

router = APIRouter(prefix=config.api_prefix)


@router.get("/leaderboard", response_model=LeaderboardResponse)
async def get_leaderboard(
    search: str | None = None, category: PodiumCategory | None = None
) -> LeaderboardResponse:
    filters = LeaderboardFilters(name_substring=search, category=category)
    return LeaderboardResponse(
        data=compute_leaderboard(await get_clubs(), await get_podiums(), filters)
    )


@router.get("/leaderboard/medals", response_model=MedalTalliesResponse)
async def get_medal_leaderboard(
    search: str | None = None, category: PodiumCategory | None = None
) -> MedalTalliesResponse:
    filters = LeaderboardFilters(name_substring=search, category=category)
    return MedalTalliesResponse(
        data=compute_medal_tallies(await get_clubs(), await get_podiums(), filters)
    )


@router.get("/leaderboard/points", response_model=PointsTalliesResponse)
async def get_points_leaderboard(
    search: str | None = None, category: PodiumCategory | None = None
) -> PointsTalliesResponse:
    filters = LeaderboardFilters(name_substring=search, category=category)
    return PointsTalliesResponse(
        data=compute_points_tallies(await get_clubs(), await get_podiums(), filters)
    )


@router.websocket("/leaderboard/live")
async def live_leaderboard(
    websocket: WebSocket, search: str | None = None, category: PodiumCategory | None = None
) -> None:
    await websocket.accept()

    async def push(view: LeaderboardView) -> None:
        await websocket.send_json(view.model_dump(mode="json"))

    leaderboard = LiveLeaderboard(
        push, LeaderboardFilters(name_substring=search, category=category)
    )
    try:
        await leaderboard.start()
        # Clients never send anything meaningful; reading only detects the disconnect.
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.info("Live leaderboard client disconnected")
    finally:
        leaderboard.close()
