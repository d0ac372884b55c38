"""Request/response schemas for meal endpoints."""

import datetime as dt

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


class MealCreate(BaseModel):
    """Body for POST /meals. imageUrl is the reference returned by /upload."""

    date: dt.date
    menu: str
    image_url: str | None = Field(
        default=None,
        max_length=2048,
        validation_alias=AliasChoices("imageUrl", "image_url"),
    )

    @field_validator("menu")
    @classmethod
    def validate_menu(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise PydanticCustomError("menu_required", "Date and menu are required.")
        return v

    @field_validator("image_url")
    @classmethod
    def blank_image_url_is_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()


class MealResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    date: dt.date
    menu: str
    image_url: str | None = Field(default=None, serialization_alias="imageUrl")


class CreatedResponse(BaseModel):
    """Generic 201 body carrying the new row id."""

    message: str
    id: int


class MessageResponse(BaseModel):
    message: str
