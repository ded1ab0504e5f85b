"""
SnapEdit Backend: Ownership Resolver
=======================================

What:  Look up a project or screenshot by id *and* owner.
Why:   Every parent reference (projectId, screenshotId) and every update
       target must belong to the caller.
How:   One equality-filtered SELECT; zero rows → NotFoundError.

A row that exists but belongs to another user is reported exactly like a
row that does not exist, so ids cannot be probed across tenants.
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from snapedit.exceptions import NotFoundError
from snapedit.models import Project, Screenshot

logger = logging.getLogger(__name__)


async def get_owned_project(db: AsyncSession, project_id: str, owner_id: str) -> Project:
    """Return the project with this id owned by `owner_id`, or raise NotFoundError."""
    result = await db.execute(
        select(Project).where(Project.id == project_id, Project.owner_id == owner_id)
    )
    project = result.scalar_one_or_none()
    if project is None:
        logger.debug("Project %s not resolved for owner %s", project_id, owner_id)
        raise NotFoundError(resource="Project", resource_id=project_id)
    return project


async def get_owned_screenshot(db: AsyncSession, screenshot_id: str, owner_id: str) -> Screenshot:
    """Return the screenshot with this id owned by `owner_id`, or raise NotFoundError."""
    result = await db.execute(
        select(Screenshot).where(
            Screenshot.id == screenshot_id,
            Screenshot.owner_id == owner_id,
        )
    )
    screenshot = result.scalar_one_or_none()
    if screenshot is None:
        logger.debug("Screenshot %s not resolved for owner %s", screenshot_id, owner_id)
        raise NotFoundError(resource="Screenshot", resource_id=screenshot_id)
    return screenshot
