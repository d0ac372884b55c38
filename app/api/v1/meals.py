"""Meal endpoints: publish, list, look up by date, delete."""

from datetime import date
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.schemas.meal import CreatedResponse, MealCreate, MealResponse, MessageResponse
from app.services.meals import create_meal, delete_meal, get_meal_by_date, list_meals

router = APIRouter()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def post_meal(
    body: MealCreate,
    db: Annotated[Session, Depends(get_db)],
) -> CreatedResponse:
    """Publish the menu for a date. 409 if that date already has a meal."""
    meal_id = create_meal(db, body.date, body.menu, body.image_url)
    return CreatedResponse(message="Meal added successfully", id=meal_id)


@router.get("", response_model=list[MealResponse])
def get_meals(db: Annotated[Session, Depends(get_db)]) -> list[MealResponse]:
    """All meals, newest date first."""
    return [MealResponse.model_validate(m) for m in list_meals(db)]


@router.get("/{meal_date}", response_model=MealResponse)
def get_meal(
    meal_date: date,
    db: Annotated[Session, Depends(get_db)],
) -> MealResponse:
    """The meal published for meal_date (YYYY-MM-DD)."""
    return MealResponse.model_validate(get_meal_by_date(db, meal_date))


@router.delete("/{meal_id}", response_model=MessageResponse)
def remove_meal(
    meal_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Delete a meal; its reviews are deleted with it."""
    delete_meal(db, meal_id)
    return MessageResponse(message="Meal deleted successfully")
