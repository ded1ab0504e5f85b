"""
SnapEdit Backend: Screenshot SQLAlchemy Model
================================================

What:  ORM model representing the `screenshots` table.
Why:   One captured image plus a pointer to its latest edited rendering.
Who:   Used by ScreenshotService, ScreenshotEditService and the ownership resolver.

Table Design Rationale:
    - project_id: optional; a screenshot may exist unattached. When set it
      references a project owned by the same user (checked by the service
      at create and at reassignment, not by the database)
    - original_image_url: required and immutable; no update path accepts it
    - edited_image_url: latest rendered edit, replaced by updates
    - width/height: pixel dimensions when the client knows them
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from snapedit.database import Base


class Screenshot(Base):
    """A captured image owned by one user, optionally filed under a project."""

    __tablename__ = "screenshots"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )

    project_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("projects.id"),
        nullable=True,
    )

    owner_id: Mapped[str] = mapped_column(String(255), nullable=False)

    # ── Image References (opaque URLs) ────────────────────────────────────
    original_image_url: Mapped[str] = mapped_column(Text, nullable=False)
    edited_image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    width: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    height: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    # ── Timestamps ────────────────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    # Listing by project is always scoped by owner as well
    __table_args__ = (
        Index("idx_screenshots_owner_project", "owner_id", "project_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Screenshot(id={self.id}, owner_id='{self.owner_id}', "
            f"project_id={self.project_id!r})>"
        )
