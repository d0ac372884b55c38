"""Review store: at most one rating per (meal, user), first write wins."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, InvalidInputError, NotFoundError
from app.models import Meal, Review
from app.services.tally import RATING_BUCKETS

logger = logging.getLogger(__name__)


def create_review(
    db: Session,
    meal_id: int,
    user_id: int,
    rating: int,
    comment: str | None = None,
) -> int:
    """
    Store a vote and return its id.

    Raises InvalidInputError for a rating outside 1..5, NotFoundError if the meal does
    not exist, and ConflictError if this user already reviewed this meal. The unique
    constraint decides concurrent submissions, so exactly one of them succeeds. Any
    other integrity failure (e.g. a user id with no row) propagates.
    """
    if isinstance(rating, bool) or not isinstance(rating, int) or rating not in RATING_BUCKETS:
        raise InvalidInputError("Rating must be an integer from 1 to 5.")
    if db.query(Meal.id).filter(Meal.id == meal_id).first() is None:
        raise NotFoundError("Meal not found.")

    review = Review(meal_id=meal_id, user_id=user_id, rating=rating, comment=comment)
    try:
        db.add(review)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if _review_exists(db, meal_id, user_id):
            logger.info("Duplicate review rejected: meal_id=%s user_id=%s", meal_id, user_id)
            raise ConflictError("You have already reviewed this meal.") from e
        if db.query(Meal.id).filter(Meal.id == meal_id).first() is None:
            raise NotFoundError("Meal not found.") from e
        raise
    return review.id


def _review_exists(db: Session, meal_id: int, user_id: int) -> bool:
    return (
        db.query(Review.id)
        .filter(Review.meal_id == meal_id, Review.user_id == user_id)
        .first()
        is not None
    )


def list_reviews_for_meal(db: Session, meal_id: int) -> list[Review]:
    """Reviews for meal_id in no particular order; empty if the meal has none or does not exist."""
    return db.query(Review).filter(Review.meal_id == meal_id).all()
