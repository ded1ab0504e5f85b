"""
SnapEdit Backend: Project SQLAlchemy Model
=============================================

What:  ORM model representing the `projects` table.
Why:   A project groups the screenshots captured for one bug report,
       review, or session.
Who:   Used by ProjectService and the ownership resolver; read by Alembic.

Table Design Rationale:
    - id: uuid4 rendered as a 36-char string, generated in Python so the
      value is known before the INSERT is flushed
    - owner_id: copied from the acting user at creation, never updated;
      every query filters on it, hence the index
    - title/description/source_device/source_app: free-form, all optional
    - updated_at: refreshed by every successful update
"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from snapedit.database import Base


class Project(Base):
    """
    A user-owned grouping of screenshots.

    Lifecycle:
        1. Created by its owner with any subset of the descriptive fields
        2. Updated field-by-field (partial updates only)
        3. Never deleted by this service
    """

    __tablename__ = "projects"

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )

    owner_id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Id of the user who created the project; immutable",
    )

    # ── Descriptive Fields ────────────────────────────────────────────────
    # e.g. title="Bug report for login page", source_device="MacBook", source_app="Chrome"
    title: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    source_device: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    source_app: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

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

    __table_args__ = (
        Index("idx_projects_owner_id", "owner_id"),
    )

    def __repr__(self) -> str:
        return f"<Project(id={self.id}, owner_id='{self.owner_id}', title={self.title!r})>"
