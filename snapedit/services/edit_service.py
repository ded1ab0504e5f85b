"""
SnapEdit Backend: Screenshot Edit Service
============================================

What:  createScreenshotEdit and listScreenshotEdits.
Why:   Edits form an append-only audit trail per screenshot. This service
       has no update or delete method, and nothing else writes the table.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from snapedit.auth import CurrentUser, require_user
from snapedit.models import ScreenshotEdit
from snapedit.schemas.common import ActionResponse
from snapedit.schemas.screenshot_edit import (
    CreateScreenshotEditInput,
    ListScreenshotEditsInput,
    ScreenshotEditData,
    ScreenshotEditList,
    ScreenshotEditOut,
)
from snapedit.services.ownership import get_owned_screenshot

logger = logging.getLogger(__name__)


class ScreenshotEditService:
    """Append-only edit log for the caller's screenshots."""

    async def create_edit(
        self,
        db: AsyncSession,
        caller: Optional[CurrentUser],
        data: CreateScreenshotEditInput,
    ) -> ActionResponse[ScreenshotEditData]:
        """
        Append one edit entry to a screenshot the caller owns.

        Raises:
            UnauthorizedError: No caller
            NotFoundError: Screenshot absent or owned by another user
        """
        user = require_user(caller)
        await get_owned_screenshot(db, data.screenshot_id, user.id)

        edit = ScreenshotEdit(
            id=str(uuid.uuid4()),
            screenshot_id=data.screenshot_id,
            owner_id=user.id,
            edit_type=data.edit_type,
            operations_json=data.operations_json,
            result_image_url=data.result_image_url,
            created_at=datetime.now(timezone.utc),
        )
        db.add(edit)
        await db.flush()
        logger.info(
            "Edit %s recorded for screenshot %s (type=%s)",
            edit.id, data.screenshot_id, data.edit_type,
        )

        return ActionResponse[ScreenshotEditData](
            data=ScreenshotEditData(edit=ScreenshotEditOut.model_validate(edit))
        )

    async def list_edits(
        self,
        db: AsyncSession,
        caller: Optional[CurrentUser],
        data: ListScreenshotEditsInput,
    ) -> ActionResponse[ScreenshotEditList]:
        """Return the caller's edits for one of their screenshots, oldest first."""
        user = require_user(caller)
        await get_owned_screenshot(db, data.screenshot_id, user.id)

        result = await db.execute(
            select(ScreenshotEdit)
            .where(
                ScreenshotEdit.screenshot_id == data.screenshot_id,
                ScreenshotEdit.owner_id == user.id,
            )
            .order_by(ScreenshotEdit.created_at.asc())
        )
        edits = list(result.scalars().all())

        return ActionResponse[ScreenshotEditList](
            data=ScreenshotEditList(
                items=[ScreenshotEditOut.model_validate(e) for e in edits],
                total=len(edits),
            )
        )


# ── Singleton Instance ────────────────────────────────────────────────────
screenshot_edit_service = ScreenshotEditService()
