"""User projections."""

from typing import Any, Optional

from pydantic import model_validator

from club.domain.model.common import DomainModel, id_field
from club.domain.value import UserId, UserRole


class Author(DomainModel):
    """Author reference embedded in comments, posts and notifications."""

    id: UserId = id_field()
    username: str = ""
    profile_image: Optional[str] = None
    role: Optional[UserRole] = None

    @model_validator(mode="before")
    @classmethod
    def accept_bare_id(cls, data: Any) -> Any:
        """An unpopulated reference arrives as the id string alone."""
        if isinstance(data, str):
            return {"_id": data}
        return data


class SessionUser(DomainModel):
    """The logged-in user as returned by login and ``/auth/me``."""

    id: UserId = id_field()
    username: str
    email: Optional[str] = None
    role: UserRole = UserRole.USER
    profile_image: Optional[str] = None
    is_active: bool = True

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN
