"""Review endpoints: cast a vote (authenticated), list votes, and tally them."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.meal import CreatedResponse
from app.schemas.review import ReviewCreate, ReviewResponse, TallyResponse
from app.services.reviews import create_review, list_reviews_for_meal
from app.services.tally import tally

router = APIRouter()


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def post_review(
    body: ReviewCreate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CreatedResponse:
    """
    Rate a meal 1-5 as the authenticated user. A user's vote for a meal is final:
    a second submission answers 409 and the first vote stays.
    """
    review_id = create_review(
        db,
        meal_id=body.meal_id,
        user_id=current_user.id,
        rating=body.rating,
        comment=body.comment,
    )
    return CreatedResponse(message="Review added successfully", id=review_id)


@router.get("/{meal_id}", response_model=list[ReviewResponse])
def get_reviews(
    meal_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> list[ReviewResponse]:
    return [ReviewResponse.model_validate(r) for r in list_reviews_for_meal(db, meal_id)]


@router.get("/{meal_id}/tally", response_model=TallyResponse)
def get_tally(
    meal_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> TallyResponse:
    """Vote counts for buckets 1-5, computed from the stored reviews on every call."""
    reviews = list_reviews_for_meal(db, meal_id)
    counts = tally(reviews)
    return TallyResponse(meal_id=meal_id, counts=counts, total=sum(counts.values()))
