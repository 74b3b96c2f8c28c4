"""Member dashboard counters."""

from pydantic import Field

from club.domain.model.common import DomainModel
from club.domain.value import PostStatus


class DashboardStats(DomainModel):
    """Post counts per status for the session user."""

    published: int = Field(default=0, ge=0)
    drafts: int = Field(default=0, ge=0)
    pending: int = Field(default=0, ge=0)
    rejected: int = Field(default=0, ge=0)

    @classmethod
    def from_counts(cls, counts: dict[PostStatus, int]) -> "DashboardStats":
        return cls(
            published=counts.get(PostStatus.PUBLISHED, 0),
            drafts=counts.get(PostStatus.DRAFT, 0),
            pending=counts.get(PostStatus.PENDING, 0),
            rejected=counts.get(PostStatus.REJECTED, 0),
        )
