import inspect
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field

from podiumboard.models.db.club import Club
from podiumboard.models.db.podium import Podium
from podiumboard.sql.clubs import get_clubs
from podiumboard.sql.podiums import get_podiums
from podiumboard.utils.logging import logger

type OnChange[RowT] = Callable[[list[RowT]], Awaitable[None] | None]
type RowPredicate[RowT] = Callable[[RowT], bool]
Unsubscribe = Callable[[], None]


@dataclass(eq=False)
class _Subscription[RowT]:
    on_change: OnChange[RowT]
    where: RowPredicate[RowT] | None = None

    def matching(self, rows: Sequence[RowT]) -> list[RowT]:
        if self.where is None:
            return list(rows)
        return [row for row in rows if self.where(row)]


@dataclass
class LiveRowSet[RowT]:
    """
    Change feed for one table.

    Subscribers receive the complete (optionally filtered) row set every time ``publish`` is
    called, never a diff. Mutations call ``publish`` once they have been committed.
    """

    name: str
    fetch_rows: Callable[[], Awaitable[list[RowT]]]
    _subscriptions: list[_Subscription[RowT]] = field(default_factory=list, init=False, repr=False)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(
        self, on_change: OnChange[RowT], *, where: RowPredicate[RowT] | None = None
    ) -> Unsubscribe:
        subscription = _Subscription(on_change=on_change, where=where)
        self._subscriptions.append(subscription)

        def unsubscribe() -> None:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

        return unsubscribe

    async def deliver(self, rows: Sequence[RowT]) -> None:
        for subscription in list(self._subscriptions):
            try:
                delivered = subscription.on_change(subscription.matching(rows))
                if inspect.isawaitable(delivered):
                    await delivered
            except Exception:
                logger.exception("Subscriber of live row set %s failed", self.name)

    async def publish(self) -> None:
        if len(self._subscriptions) < 1:
            return
        await self.deliver(await self.fetch_rows())


live_clubs: LiveRowSet[Club] = LiveRowSet("clubs", lambda: get_clubs())
live_podiums: LiveRowSet[Podium] = LiveRowSet("podiums", lambda: get_podiums())
