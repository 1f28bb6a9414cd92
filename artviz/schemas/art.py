"""
Pydantic schemas for the art visualization API
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from artviz.core.errors import ErrorKind


class ArtVisualizationRequest(BaseModel):
    """Body of POST /api/generate-art"""

    image: Optional[str] = Field(None, description="Room photo as a data URL (data:<mime>;base64,<payload>)")
    artType: Optional[str] = Field(None, description="Art type identifier; unknown values fall back to painting")

    @field_validator("artType", mode="before")
    @classmethod
    def _non_string_art_type_is_unset(cls, value: Any) -> Optional[str]:
        # Non-string identifiers resolve to the default art type downstream
        return value if isinstance(value, str) else None

    class Config:
        json_schema_extra = {
            "example": {
                "image": "data:image/jpeg;base64,/9j/4AAQSkZJRg...",
                "artType": "gallery_wall",
            }
        }


class ArtVisualizationResponse(BaseModel):
    """Either {success: true, imageUrl} or {success: false, error, errorKind}"""

    success: bool
    imageUrl: Optional[str] = None
    error: Optional[str] = None
    errorKind: Optional[ErrorKind] = None

    @classmethod
    def ok(cls, image_url: str) -> "ArtVisualizationResponse":
        return cls(success=True, imageUrl=image_url)

    @classmethod
    def failure(cls, error: str, kind: ErrorKind) -> "ArtVisualizationResponse":
        return cls(success=False, error=error, errorKind=kind)


class ArtTypeSchema(BaseModel):
    value: str
    label: str


class ArtTypesResponse(BaseModel):
    artTypes: List[ArtTypeSchema]
    default: str
