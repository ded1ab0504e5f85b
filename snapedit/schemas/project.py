"""
SnapEdit Backend: Project Schemas
====================================

Inputs for createProject / updateProject / listProjects and the project
record as returned to callers.
"""

from typing import Optional

from pydantic import Field, model_validator

from snapedit.schemas.common import CamelModel, ItemList, UtcDatetime, require_any_field

PROJECT_UPDATE_FIELDS = ("title", "description", "source_device", "source_app")


class ProjectOut(CamelModel):
    id: str
    owner_id: str
    title: Optional[str] = None
    description: Optional[str] = None
    source_device: Optional[str] = None
    source_app: Optional[str] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime


class ProjectData(CamelModel):
    project: ProjectOut


ProjectList = ItemList[ProjectOut]


class CreateProjectInput(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    source_device: Optional[str] = None
    source_app: Optional[str] = None


class UpdateProjectInput(CamelModel):
    """
    Partial update of a project.

    Only the fields present in the input are written; at least one of
    title/description/sourceDevice/sourceApp is required.
    """

    id: str = Field(min_length=1)
    title: Optional[str] = None
    description: Optional[str] = None
    source_device: Optional[str] = None
    source_app: Optional[str] = None

    @model_validator(mode="after")
    def check_has_changes(self) -> "UpdateProjectInput":
        require_any_field(self, PROJECT_UPDATE_FIELDS)
        return self


class ListProjectsInput(CamelModel):
    pass
