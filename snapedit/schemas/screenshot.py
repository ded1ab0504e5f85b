"""
SnapEdit Backend: Screenshot Schemas
=======================================

originalImageUrl is accepted only at creation; UpdateScreenshotInput has
no field for it, so the original reference can never change.
"""

from typing import Optional

from pydantic import Field, model_validator

from snapedit.schemas.common import CamelModel, ItemList, UtcDatetime, require_any_field

SCREENSHOT_UPDATE_FIELDS = ("project_id", "edited_image_url", "width", "height")


class ScreenshotOut(CamelModel):
    id: str
    project_id: Optional[str] = None
    owner_id: str
    original_image_url: str
    edited_image_url: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    created_at: UtcDatetime
    updated_at: UtcDatetime


class ScreenshotData(CamelModel):
    screenshot: ScreenshotOut


ScreenshotList = ItemList[ScreenshotOut]


class CreateScreenshotInput(CamelModel):
    project_id: Optional[str] = None
    original_image_url: str = Field(min_length=1)
    edited_image_url: Optional[str] = None
    width: Optional[int] = Field(default=None, ge=0, strict=True)
    height: Optional[int] = Field(default=None, ge=0, strict=True)


class UpdateScreenshotInput(CamelModel):
    """
    Partial update of a screenshot.

    An explicit null projectId detaches the screenshot from its project;
    an omitted projectId leaves it where it is.
    """

    id: str = Field(min_length=1)
    project_id: Optional[str] = None
    edited_image_url: Optional[str] = None
    width: Optional[int] = Field(default=None, ge=0, strict=True)
    height: Optional[int] = Field(default=None, ge=0, strict=True)

    @model_validator(mode="after")
    def check_has_changes(self) -> "UpdateScreenshotInput":
        require_any_field(self, SCREENSHOT_UPDATE_FIELDS)
        return self


class ListScreenshotsInput(CamelModel):
    project_id: Optional[str] = None
