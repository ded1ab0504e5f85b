"""
SnapEdit Backend: ORM Models
==============================

Importing this package registers every table on `Base.metadata`, which
Alembic autogenerate and the test schema setup both rely on.

Relationships:
    Project 1 ──< Screenshot (optional project_id)
    Screenshot 1 ──< ScreenshotEdit (required screenshot_id)
"""

from snapedit.models.project import Project
from snapedit.models.screenshot import Screenshot
from snapedit.models.screenshot_edit import ScreenshotEdit

__all__ = ["Project", "Screenshot", "ScreenshotEdit"]
