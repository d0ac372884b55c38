"""Request/response schemas for reviews and vote tallies."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, field_validator
from pydantic_core import PydanticCustomError

from app.services.tally import RATING_BUCKETS


class ReviewCreate(BaseModel):
    """Body for POST /reviews. The reviewer comes from the session token, not the body."""

    meal_id: StrictInt
    rating: StrictInt
    comment: str | None = Field(default=None, max_length=2000)

    @field_validator("rating")
    @classmethod
    def validate_rating(cls, v: int) -> int:
        if v not in RATING_BUCKETS:
            raise PydanticCustomError("rating_range", "Rating must be an integer from 1 to 5.")
        return v


class ReviewResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    meal_id: int
    user_id: int
    rating: int
    comment: str | None = None


class TallyResponse(BaseModel):
    """Vote counts per rating bucket for one meal."""

    meal_id: int
    counts: dict[int, int]
    total: int = Field(..., ge=0)
