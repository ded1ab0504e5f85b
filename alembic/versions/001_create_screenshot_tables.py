"""Create projects, screenshots and screenshot_edits tables

Revision ID: 001
Revises: None
Create Date: 2026-10-16 00:00:00.000000+00:00

What:  Initial schema for screenshot projects, screenshots and the
       append-only screenshot edit log.
How:   String ids generated by the application, timezone-aware timestamps,
       foreign keys from child to parent, owner indexes for the
       owner-scoped queries.

Rollback: downgrade() drops all three tables (destructive).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamp(name: str) -> sa.Column:
    return sa.Column(
        name,
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "projects",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column(
            "owner_id",
            sa.String(255),
            nullable=False,
            comment="Id of the user who created the project; immutable",
        ),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("source_device", sa.Text(), nullable=True),
        sa.Column("source_app", sa.Text(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_projects_owner_id", "projects", ["owner_id"])

    op.create_table(
        "screenshots",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("project_id", sa.String(36), nullable=True),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("original_image_url", sa.Text(), nullable=False),
        sa.Column("edited_image_url", sa.Text(), nullable=True),
        sa.Column("width", sa.Integer(), nullable=True),
        sa.Column("height", sa.Integer(), nullable=True),
        _timestamp("created_at"),
        _timestamp("updated_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["project_id"], ["projects.id"]),
    )
    op.create_index(
        "idx_screenshots_owner_project", "screenshots", ["owner_id", "project_id"]
    )

    # Append-only: no updated_at
    op.create_table(
        "screenshot_edits",
        sa.Column("id", sa.String(36), nullable=False),
        sa.Column("screenshot_id", sa.String(36), nullable=False),
        sa.Column("owner_id", sa.String(255), nullable=False),
        sa.Column("edit_type", sa.Text(), nullable=True),
        sa.Column("operations_json", sa.Text(), nullable=True),
        sa.Column("result_image_url", sa.Text(), nullable=True),
        _timestamp("created_at"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["screenshot_id"], ["screenshots.id"]),
    )
    op.create_index(
        "idx_screenshot_edits_screenshot_owner",
        "screenshot_edits",
        ["screenshot_id", "owner_id"],
    )


def downgrade() -> None:
    """Drop all three tables, children first. All data is lost."""
    op.drop_index("idx_screenshot_edits_screenshot_owner", table_name="screenshot_edits")
    op.drop_table("screenshot_edits")
    op.drop_index("idx_screenshots_owner_project", table_name="screenshots")
    op.drop_table("screenshots")
    op.drop_index("idx_projects_owner_id", table_name="projects")
    op.drop_table("projects")
