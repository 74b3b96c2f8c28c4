"""Base model for all mirrored entities."""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DomainModel(BaseModel):
    """Base class for all client-side entity projections.

    Models are immutable; stores replace them with updated copies. Server
    JSON is camelCase, so fields validate from their camelCase alias as well
    as from their Python name.
    """

    model_config = ConfigDict(
        frozen=True,  # Stores swap copies, never mutate
        arbitrary_types_allowed=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


def id_field(**kwargs: Any) -> Any:
    """Entity id field accepting both ``_id`` and ``id`` keys."""
    return Field(validation_alias=AliasChoices("_id", "id"), **kwargs)


def ref_id(value: Any) -> Any:
    """Collapse a populated reference to its id.

    The server sometimes populates references (``{"_id": ..., "username": ...}``)
    and sometimes sends the bare id.
    """
    if isinstance(value, dict):
        return value.get("_id") or value.get("id")
    return value


def toggle_like(likes: list[str], user_id: str) -> list[str]:
    """Return ``likes`` with ``user_id`` added if absent, removed if present."""
    if user_id in likes:
        return [liker for liker in likes if liker != user_id]
    return [*likes, user_id]
