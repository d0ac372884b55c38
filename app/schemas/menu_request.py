"""Request/response schemas for menu suggestions."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError


class MenuRequestCreate(BaseModel):
    request_date: dt.date
    requested_menu: str = Field(..., max_length=2000)

    @field_validator("requested_menu")
    @classmethod
    def validate_requested_menu(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise PydanticCustomError(
                "requested_menu_required",
                "Request date and requested menu are required.",
            )
        return v


class MenuRequestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    request_date: dt.date
    requested_menu: str
