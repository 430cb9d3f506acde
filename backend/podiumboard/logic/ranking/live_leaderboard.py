import inspect
import time
from collections.abc import Awaitable, Callable

from podiumboard.config import config
from podiumboard.logic.live import LiveRowSet, Unsubscribe, live_clubs, live_podiums
from podiumboard.logic.ranking.tallies import club_name_matches, compute_leaderboard
from podiumboard.models.db.club import Club
from podiumboard.models.db.podium import Podium
from podiumboard.models.leaderboard import LeaderboardFilters, LeaderboardView
from podiumboard.utils.logging import logger

OnLeaderboardUpdate = Callable[[LeaderboardView], Awaitable[None] | None]


class LiveLeaderboard:
    """Keeps a leaderboard up to date with the club and podium change feeds."""

    def __init__(
        self,
        on_update: OnLeaderboardUpdate,
        filters: LeaderboardFilters | None = None,
        *,
        club_feed: LiveRowSet[Club] = live_clubs,
        podium_feed: LiveRowSet[Podium] = live_podiums,
    ) -> None:
        self.on_update = on_update
        self.filters = filters or LeaderboardFilters()
        self.club_feed = club_feed
        self.podium_feed = podium_feed
        self.clubs: list[Club] = []
        self.podiums: list[Podium] = []
        self._unsubscribers: list[Unsubscribe] = []
        self._started = False
        self._club_deliveries = 0
        self._podium_deliveries = 0

    def _club_in_scope(self, club: Club) -> bool:
        return club_name_matches(club, self.filters.name_substring)

    def _podium_in_scope(self, podium: Podium) -> bool:
        return self.filters.category is None or podium.category == self.filters.category

    async def start(self) -> LeaderboardView:
        # Subscribe before the initial fetch so no change committed in between is missed.
        self._unsubscribers = [
            self.club_feed.subscribe(self._on_clubs_changed, where=self._club_in_scope),
            self.podium_feed.subscribe(self._on_podiums_changed, where=self._podium_in_scope),
        ]

        club_deliveries = self._club_deliveries
        clubs = [club for club in await self.club_feed.fetch_rows() if self._club_in_scope(club)]
        if self._club_deliveries == club_deliveries:
            self.clubs = clubs

        podium_deliveries = self._podium_deliveries
        podiums = [
            podium for podium in await self.podium_feed.fetch_rows() if self._podium_in_scope(podium)
        ]
        if self._podium_deliveries == podium_deliveries:
            self.podiums = podiums

        self._started = True
        return await self.recompute()

    async def _on_clubs_changed(self, rows: list[Club]) -> None:
        self._club_deliveries += 1
        self.clubs = rows
        if self._started:
            await self.recompute()

    async def _on_podiums_changed(self, rows: list[Podium]) -> None:
        self._podium_deliveries += 1
        self.podiums = rows
        if self._started:
            await self.recompute()

    async def recompute(self) -> LeaderboardView:
        started_at = time.monotonic()
        view = compute_leaderboard(self.clubs, self.podiums, self.filters)

        duration_ms = int((time.monotonic() - started_at) * 1000)
        if duration_ms >= config.slow_recompute_warn_ms:
            logger.warning(
                "Leaderboard recompute was slow: clubs=%s podiums=%s duration_ms=%s",
                len(self.clubs),
                len(self.podiums),
                duration_ms,
            )

        delivered = self.on_update(view)
        if inspect.isawaitable(delivered):
            await delivered
        return view

    def close(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
