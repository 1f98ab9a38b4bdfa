from pydantic import BaseModel, Field, model_validator
from typing import Optional


class PathReferenceRequest(BaseModel):
    """Request DTO describing the editor state to reference."""

    project_root: str
    file_path: str  # Absolute, or already relative to project_root
    project_name: Optional[str] = None
    document_text: Optional[str] = None  # Read from disk when omitted
    selection_start: Optional[int] = Field(default=None, ge=0)
    selection_end: Optional[int] = Field(default=None, ge=0)
    copy_to_clipboard: bool = True

    class Config:
        json_schema_extra = {
            "example": {
                "project_root": "/home/dev/project",
                "file_path": "/home/dev/project/src/main.py",
                "selection_start": 120,
                "selection_end": 310,
                "copy_to_clipboard": True,
            }
        }

    @model_validator(mode="after")
    def check_selection_pair(self) -> "PathReferenceRequest":
        if (self.selection_start is None) != (self.selection_end is None):
            raise ValueError("selection_start and selection_end must be sent together")
        return self

    @property
    def has_selection(self) -> bool:
        return self.selection_start is not None and self.selection_end is not None


class PathReferenceResponse(BaseModel):
    """Response DTO with the formatted reference.

    ``reference`` is None when the document could not be resolved.
    """

    reference: Optional[str] = None
    copied: bool = False

    class Config:
        json_schema_extra = {
            "example": {"reference": "@project/src/main.py#L5-11", "copied": True}
        }
