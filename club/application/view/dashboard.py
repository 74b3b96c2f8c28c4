"""Member dashboard counters."""

import asyncio

from club.application.listener import RealtimeListener
from club.application.mutator import OptimisticMutator
from club.application.session import Session
from club.application.view.base import View
from club.domain.model.dashboard import DashboardStats
from club.domain.repository.post import PostRepository
from club.domain.value import PostStatus, PushEvent


class Dashboard(View):
    """Post counts per status for the session user."""

    fetch_failure = "Failed to fetch dashboard stats"

    def __init__(
        self,
        posts: PostRepository,
        mutator: OptimisticMutator,
        listener: RealtimeListener,
        session: Session,
    ) -> None:
        super().__init__(mutator, listener, session)
        self.stats = DashboardStats()
        self._posts = posts

    async def _reload(self) -> None:
        statuses = list(PostStatus)
        counts = await asyncio.gather(*(self._posts.count_mine(s) for s in statuses))
        self.stats = DashboardStats.from_counts(dict(zip(statuses, counts)))

    def _bind(self) -> None:
        self._listen(PushEvent.DASHBOARD_STATS_UPDATED, self._replace)

    def _replace(self, stats: DashboardStats) -> None:
        self.stats = stats
