"""
SnapEdit Backend: Project Actions
====================================

POST /_actions/createProject, /_actions/updateProject, /_actions/listProjects
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from snapedit.auth import CurrentUser, get_current_user
from snapedit.database import get_db_session
from snapedit.schemas.common import ActionResponse, ErrorResponse
from snapedit.schemas.project import (
    CreateProjectInput,
    ListProjectsInput,
    ProjectData,
    ProjectList,
    UpdateProjectInput,
)
from snapedit.services.project_service import project_service

router = APIRouter(prefix="/_actions", tags=["Projects"])

UNAUTHORIZED = {401: {"description": "No authenticated caller", "model": ErrorResponse}}
NOT_FOUND = {404: {"description": "Project not found or not owned", "model": ErrorResponse}}
BAD_REQUEST = {400: {"description": "Invalid input", "model": ErrorResponse}}


@router.post(
    "/createProject",
    response_model=ActionResponse[ProjectData],
    responses={**UNAUTHORIZED, **BAD_REQUEST},
    summary="Create a project owned by the caller",
)
async def create_project(
    payload: CreateProjectInput,
    db: AsyncSession = Depends(get_db_session),
    caller: Optional[CurrentUser] = Depends(get_current_user),
) -> ActionResponse[ProjectData]:
    return await project_service.create_project(db=db, caller=caller, data=payload)


@router.post(
    "/updateProject",
    response_model=ActionResponse[ProjectData],
    responses={**UNAUTHORIZED, **NOT_FOUND, **BAD_REQUEST},
    summary="Partially update one of the caller's projects",
    description="At least one of title, description, sourceDevice, sourceApp is required.",
)
async def update_project(
    payload: UpdateProjectInput,
    db: AsyncSession = Depends(get_db_session),
    caller: Optional[CurrentUser] = Depends(get_current_user),
) -> ActionResponse[ProjectData]:
    return await project_service.update_project(db=db, caller=caller, data=payload)


@router.post(
    "/listProjects",
    response_model=ActionResponse[ProjectList],
    responses={**UNAUTHORIZED},
    summary="List the caller's projects",
)
async def list_projects(
    payload: Optional[ListProjectsInput] = Body(default=None),
    db: AsyncSession = Depends(get_db_session),
    caller: Optional[CurrentUser] = Depends(get_current_user),
) -> ActionResponse[ProjectList]:
    return await project_service.list_projects(db=db, caller=caller, data=payload)
