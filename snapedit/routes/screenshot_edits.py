"""
SnapEdit Backend: Screenshot Edit Actions
============================================

POST /_actions/createScreenshotEdit, /_actions/listScreenshotEdits

There is deliberately no update or delete route: the edit log is append-only.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from snapedit.auth import CurrentUser, get_current_user
from snapedit.database import get_db_session
from snapedit.schemas.common import ActionResponse, ErrorResponse
from snapedit.schemas.screenshot_edit import (
    CreateScreenshotEditInput,
    ListScreenshotEditsInput,
    ScreenshotEditData,
    ScreenshotEditList,
)
from snapedit.services.edit_service import screenshot_edit_service

router = APIRouter(prefix="/_actions", tags=["Screenshot Edits"])

ERRORS = {
    400: {"description": "Invalid input", "model": ErrorResponse},
    401: {"description": "No authenticated caller", "model": ErrorResponse},
    404: {"description": "Screenshot not found or not owned", "model": ErrorResponse},
}


@router.post(
    "/createScreenshotEdit",
    response_model=ActionResponse[ScreenshotEditData],
    responses=ERRORS,
    summary="Append an edit entry to one of the caller's screenshots",
)
async def create_screenshot_edit(
    payload: CreateScreenshotEditInput,
    db: AsyncSession = Depends(get_db_session),
    caller: Optional[CurrentUser] = Depends(get_current_user),
) -> ActionResponse[ScreenshotEditData]:
    return await screenshot_edit_service.create_edit(db=db, caller=caller, data=payload)


@router.post(
    "/listScreenshotEdits",
    response_model=ActionResponse[ScreenshotEditList],
    responses=ERRORS,
    summary="List the edit history of one of the caller's screenshots",
)
async def list_screenshot_edits(
    payload: ListScreenshotEditsInput,
    db: AsyncSession = Depends(get_db_session),
    caller: Optional[CurrentUser] = Depends(get_current_user),
) -> ActionResponse[ScreenshotEditList]:
    return await screenshot_edit_service.list_edits(db=db, caller=caller, data=payload)
