"""
SnapEdit Backend: ScreenshotEdit Schemas
===========================================

Edits are append-only: there is a create input and a list input, and no
update input.
"""

from typing import Optional

from pydantic import Field

from snapedit.schemas.common import CamelModel, ItemList, UtcDatetime


class ScreenshotEditOut(CamelModel):
    id: str
    screenshot_id: str
    owner_id: str
    edit_type: Optional[str] = None
    operations_json: Optional[str] = None
    result_image_url: Optional[str] = None
    created_at: UtcDatetime


class ScreenshotEditData(CamelModel):
    edit: ScreenshotEditOut


ScreenshotEditList = ItemList[ScreenshotEditOut]


class CreateScreenshotEditInput(CamelModel):
    screenshot_id: str = Field(min_length=1)
    # crop, highlight, blur, draw, ... (free-form; new tools need no migration)
    edit_type: Optional[str] = None
    operations_json: Optional[str] = None
    result_image_url: Optional[str] = None


class ListScreenshotEditsInput(CamelModel):
    screenshot_id: str = Field(min_length=1)
