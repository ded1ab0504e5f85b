"""
SnapEdit Backend: Project Service
====================================

What:  createProject, updateProject and listProjects.
Who:   Called by the project action routes; usable directly from tests and scripts.
How:   guard → (ownership check) → one write or read → success envelope.

Design Decision:
    ProjectService is stateless: it receives the db session and the
    caller for each call. The session's commit/rollback belongs to the
    caller (get_db_session in HTTP requests), so services only flush.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from snapedit.auth import CurrentUser, require_user
from snapedit.models import Project
from snapedit.schemas.common import ActionResponse
from snapedit.schemas.project import (
    PROJECT_UPDATE_FIELDS,
    CreateProjectInput,
    ListProjectsInput,
    ProjectData,
    ProjectList,
    ProjectOut,
    UpdateProjectInput,
)
from snapedit.services.ownership import get_owned_project

logger = logging.getLogger(__name__)


class ProjectService:
    """Owner-scoped project operations."""

    async def create_project(
        self,
        db: AsyncSession,
        caller: Optional[CurrentUser],
        data: CreateProjectInput,
    ) -> ActionResponse[ProjectData]:
        """
        Insert a new project owned by the caller.

        The id and both timestamps are generated here; ownership comes from
        `caller`, never from the input.
        """
        user = require_user(caller)
        now = datetime.now(timezone.utc)

        project = Project(
            id=str(uuid.uuid4()),
            owner_id=user.id,
            title=data.title,
            description=data.description,
            source_device=data.source_device,
            source_app=data.source_app,
            created_at=now,
            updated_at=now,
        )
        db.add(project)
        await db.flush()
        logger.info("Project created: %s (owner=%s)", project.id, user.id)

        return ActionResponse[ProjectData](
            data=ProjectData(project=ProjectOut.model_validate(project))
        )

    async def update_project(
        self,
        db: AsyncSession,
        caller: Optional[CurrentUser],
        data: UpdateProjectInput,
    ) -> ActionResponse[ProjectData]:
        """
        Apply a partial update to one of the caller's projects.

        Fields absent from the input keep their stored values; updated_at
        is always refreshed.

        Raises:
            UnauthorizedError: No caller
            NotFoundError: Project absent or owned by another user
        """
        user = require_user(caller)
        project = await get_owned_project(db, data.id, user.id)

        changed = [name for name in PROJECT_UPDATE_FIELDS if name in data.model_fields_set]
        for name in changed:
            setattr(project, name, getattr(data, name))
        project.updated_at = datetime.now(timezone.utc)

        await db.flush()
        logger.info("Project %s updated: %s", project.id, ", ".join(changed))

        return ActionResponse[ProjectData](
            data=ProjectData(project=ProjectOut.model_validate(project))
        )

    async def list_projects(
        self,
        db: AsyncSession,
        caller: Optional[CurrentUser],
        data: Optional[ListProjectsInput] = None,
    ) -> ActionResponse[ProjectList]:
        """Return every project owned by the caller, newest first."""
        user = require_user(caller)

        result = await db.execute(
            select(Project)
            .where(Project.owner_id == user.id)
            .order_by(Project.created_at.desc())
        )
        projects = list(result.scalars().all())

        return ActionResponse[ProjectList](
            data=ProjectList(
                items=[ProjectOut.model_validate(p) for p in projects],
                total=len(projects),
            )
        )


# ── Singleton Instance ────────────────────────────────────────────────────
project_service = ProjectService()
