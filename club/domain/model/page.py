"""Paged list results."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of a server-side list.

    ``pages`` is the total page count reported by the server.
    """

    items: list[T]
    page: int = Field(default=1, ge=1)
    pages: int = Field(default=1, ge=0)
    total: int = Field(default=0, ge=0)

    @property
    def has_more(self) -> bool:
        return self.page < self.pages
