"""
SnapEdit Backend: Screenshot Service
=======================================

What:  createScreenshot, updateScreenshot and listScreenshots.
Who:   Called by the screenshot action routes.

Parent checks:
    A projectId is resolved against the caller's projects at creation,
    at reassignment, and when used as a list filter. The check and the
    following write are separate statements; a project changing in between
    is not guarded against.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from snapedit.auth import CurrentUser, require_user
from snapedit.models import Screenshot
from snapedit.schemas.common import ActionResponse
from snapedit.schemas.screenshot import (
    SCREENSHOT_UPDATE_FIELDS,
    CreateScreenshotInput,
    ListScreenshotsInput,
    ScreenshotData,
    ScreenshotList,
    ScreenshotOut,
    UpdateScreenshotInput,
)
from snapedit.services.ownership import get_owned_project, get_owned_screenshot

logger = logging.getLogger(__name__)


class ScreenshotService:
    """Owner-scoped screenshot operations."""

    async def create_screenshot(
        self,
        db: AsyncSession,
        caller: Optional[CurrentUser],
        data: CreateScreenshotInput,
    ) -> ActionResponse[ScreenshotData]:
        """
        Insert a screenshot owned by the caller, optionally under a project.

        Raises:
            UnauthorizedError: No caller
            NotFoundError: projectId given but not one of the caller's projects
        """
        user = require_user(caller)
        project_id = data.project_id or None
        if project_id:
            await get_owned_project(db, project_id, user.id)

        now = datetime.now(timezone.utc)
        screenshot = Screenshot(
            id=str(uuid.uuid4()),
            project_id=project_id,
            owner_id=user.id,
            original_image_url=data.original_image_url,
            edited_image_url=data.edited_image_url,
            width=data.width,
            height=data.height,
            created_at=now,
            updated_at=now,
        )
        db.add(screenshot)
        await db.flush()
        logger.info(
            "Screenshot created: %s (owner=%s, project=%s)",
            screenshot.id, user.id, project_id,
        )

        return ActionResponse[ScreenshotData](
            data=ScreenshotData(screenshot=ScreenshotOut.model_validate(screenshot))
        )

    async def update_screenshot(
        self,
        db: AsyncSession,
        caller: Optional[CurrentUser],
        data: UpdateScreenshotInput,
    ) -> ActionResponse[ScreenshotData]:
        """
        Apply a partial update to one of the caller's screenshots.

        A non-null projectId must name one of the caller's projects; an
        explicit null detaches the screenshot.

        Raises:
            UnauthorizedError: No caller
            NotFoundError: Screenshot, or target project, absent or foreign
        """
        user = require_user(caller)
        screenshot = await get_owned_screenshot(db, data.id, user.id)

        provided = data.model_fields_set
        if "project_id" in provided and data.project_id is not None:
            await get_owned_project(db, data.project_id, user.id)

        changed = [name for name in SCREENSHOT_UPDATE_FIELDS if name in provided]
        for name in changed:
            setattr(screenshot, name, getattr(data, name))
        screenshot.updated_at = datetime.now(timezone.utc)

        await db.flush()
        logger.info("Screenshot %s updated: %s", screenshot.id, ", ".join(changed))

        return ActionResponse[ScreenshotData](
            data=ScreenshotData(screenshot=ScreenshotOut.model_validate(screenshot))
        )

    async def list_screenshots(
        self,
        db: AsyncSession,
        caller: Optional[CurrentUser],
        data: Optional[ListScreenshotsInput] = None,
    ) -> ActionResponse[ScreenshotList]:
        """
        Return the caller's screenshots, newest first.

        With a projectId, the project must be the caller's and only its
        screenshots are returned.
        """
        user = require_user(caller)
        project_id = data.project_id if data else None

        query = select(Screenshot).where(Screenshot.owner_id == user.id)
        if project_id:
            await get_owned_project(db, project_id, user.id)
            query = query.where(Screenshot.project_id == project_id)

        result = await db.execute(query.order_by(Screenshot.created_at.desc()))
        screenshots = list(result.scalars().all())

        return ActionResponse[ScreenshotList](
            data=ScreenshotList(
                items=[ScreenshotOut.model_validate(s) for s in screenshots],
                total=len(screenshots),
            )
        )


# ── Singleton Instance ────────────────────────────────────────────────────
screenshot_service = ScreenshotService()
