from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

TITLE_MAX_LENGTH = 100
BODY_MAX_LENGTH = 1000

_EXAMPLE_NOTE = {
    "id": 1,
    "title": "My First Note",
    "body": "This is the content of my note",
    "createdAt": "2023-12-01T10:30:00+00:00",
    "updatedAt": "2023-12-01T10:30:00+00:00",
}


class NoteIn(BaseModel):
    # client-supplied "id" and unknown keys are dropped
    model_config = ConfigDict(
        extra="ignore",
        json_schema_extra={"examples": [{"title": "My First Note", "body": "This is the content of my note"}]},
    )

    # defaults are validated too, so a missing field reports "... is required"
    title: Optional[str] = Field(
        default=None,
        max_length=TITLE_MAX_LENGTH,
        validate_default=True,
        description="Title of the note",
    )
    body: Optional[str] = Field(
        default=None,
        max_length=BODY_MAX_LENGTH,
        validate_default=True,
        description="Content/body of the note",
    )

    @field_validator("title", "body")
    @classmethod
    def _not_blank(cls, value: Optional[str], info: ValidationInfo) -> str:
        if value is None or not value.strip():
            raise PydanticCustomError(
                "required",
                "{label} is required",
                {"label": info.field_name.capitalize()},
            )
        return value


class NoteOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True, json_schema_extra={"examples": [_EXAMPLE_NOTE]})

    id: int = Field(description="Unique identifier of the note")
    title: str
    body: str
    created_at: str = Field(alias="createdAt", description="When the note was created (ISO-8601, UTC)")
    updated_at: str = Field(alias="updatedAt", description="When the note was last updated (ISO-8601, UTC)")


class ErrorOut(BaseModel):
    status: int
    error: str
    message: str
    path: str
    timestamp: str
    fieldErrors: Optional[dict[str, str]] = None
