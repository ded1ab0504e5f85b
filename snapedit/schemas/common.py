"""
SnapEdit Backend: Shared Schema Building Blocks
==================================================

What:  Base model with camelCase aliases, the success envelope, the list
       payload, the "at least one field" refinement, UTC timestamps, and
       error/health models.
Why:   Every action answers with the same envelope shape:
           {"success": true, "data": {...}}
       and every update action applies the same refinement.
"""

from datetime import datetime, timezone
from typing import Annotated, Generic, Iterable, List, Optional, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

DataT = TypeVar("DataT")
ItemT = TypeVar("ItemT")

EMPTY_UPDATE_MESSAGE = "At least one field must be provided to update."


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive values for timestamptz columns; they are UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class CamelModel(BaseModel):
    """
    Base for every wire-facing model.

    populate_by_name lets Python callers (services, tests) use snake_case
    while HTTP clients send camelCase. Unknown keys such as `ownerId` are
    ignored, so ownership can never be set from input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )


def require_any_field(model: BaseModel, fields: Iterable[str]) -> None:
    """
    Refinement shared by the update inputs.

    A field counts as provided when the caller sent it, even as null;
    omitted fields are absent from `model_fields_set`.
    """
    if not any(name in model.model_fields_set for name in fields):
        raise ValueError(EMPTY_UPDATE_MESSAGE)


# ══════════════════════════════════════════════════════════════════════════
# Response Envelope
# ══════════════════════════════════════════════════════════════════════════


class ActionResponse(BaseModel, Generic[DataT]):
    """Uniform success envelope returned by every action."""

    success: bool = True
    data: DataT


class ItemList(CamelModel, Generic[ItemT]):
    """Payload of the list actions: the rows plus their count."""

    items: List[ItemT]
    total: int


# ══════════════════════════════════════════════════════════════════════════
# Error & Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Example:
        {
            "error": "NOT_FOUND",
            "message": "Project not found.",
            "request_id": "1f0c2a9b"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Field-level issues, if any")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
