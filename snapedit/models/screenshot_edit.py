"""
SnapEdit Backend: ScreenshotEdit SQLAlchemy Model
====================================================

What:  ORM model representing the `screenshot_edits` table.
Why:   Append-only log of edit operations applied to a screenshot.
Who:   Written and read only by ScreenshotEditService.

Rows are never updated or deleted, so there is no `updated_at` column.
`operations_json` is stored as text and never parsed by the backend; the
editor that wrote it is the only consumer.
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from snapedit.database import Base


class ScreenshotEdit(Base):
    """One edit operation (crop, highlight, blur, draw, ...) applied to a screenshot."""

    __tablename__ = "screenshot_edits"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )

    screenshot_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("screenshots.id"),
        nullable=False,
    )

    owner_id: Mapped[str] = mapped_column(String(255), nullable=False)

    edit_type: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    operations_json: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    result_image_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=text("CURRENT_TIMESTAMP"),
    )

    # History reads filter on both the screenshot and its owner
    __table_args__ = (
        Index("idx_screenshot_edits_screenshot_owner", "screenshot_id", "owner_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<ScreenshotEdit(id={self.id}, screenshot_id='{self.screenshot_id}', "
            f"edit_type={self.edit_type!r})>"
        )
