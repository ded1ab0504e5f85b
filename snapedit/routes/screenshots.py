"""
SnapEdit Backend: Screenshot Actions
=======================================

POST /_actions/createScreenshot, /_actions/updateScreenshot, /_actions/listScreenshots
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from snapedit.auth import CurrentUser, get_current_user
from snapedit.database import get_db_session
from snapedit.schemas.common import ActionResponse, ErrorResponse
from snapedit.schemas.screenshot import (
    CreateScreenshotInput,
    ListScreenshotsInput,
    ScreenshotData,
    ScreenshotList,
    UpdateScreenshotInput,
)
from snapedit.services.screenshot_service import screenshot_service

router = APIRouter(prefix="/_actions", tags=["Screenshots"])

ERRORS = {
    400: {"description": "Invalid input", "model": ErrorResponse},
    401: {"description": "No authenticated caller", "model": ErrorResponse},
    404: {"description": "Screenshot or project not found or not owned", "model": ErrorResponse},
}


@router.post(
    "/createScreenshot",
    response_model=ActionResponse[ScreenshotData],
    responses=ERRORS,
    summary="Create a screenshot, optionally under one of the caller's projects",
)
async def create_screenshot(
    payload: CreateScreenshotInput,
    db: AsyncSession = Depends(get_db_session),
    caller: Optional[CurrentUser] = Depends(get_current_user),
) -> ActionResponse[ScreenshotData]:
    return await screenshot_service.create_screenshot(db=db, caller=caller, data=payload)


@router.post(
    "/updateScreenshot",
    response_model=ActionResponse[ScreenshotData],
    responses=ERRORS,
    summary="Partially update one of the caller's screenshots",
    description=(
        "At least one of projectId, editedImageUrl, width, height is required. "
        "projectId: null detaches the screenshot from its project."
    ),
)
async def update_screenshot(
    payload: UpdateScreenshotInput,
    db: AsyncSession = Depends(get_db_session),
    caller: Optional[CurrentUser] = Depends(get_current_user),
) -> ActionResponse[ScreenshotData]:
    return await screenshot_service.update_screenshot(db=db, caller=caller, data=payload)


@router.post(
    "/listScreenshots",
    response_model=ActionResponse[ScreenshotList],
    responses=ERRORS,
    summary="List the caller's screenshots, optionally for one project",
)
async def list_screenshots(
    payload: Optional[ListScreenshotsInput] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
    caller: Optional[CurrentUser] = Depends(get_current_user),
) -> ActionResponse[ScreenshotList]:
    return await screenshot_service.list_screenshots(db=db, caller=caller, data=payload)
