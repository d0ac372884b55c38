"""Menu store: one meal per calendar date."""

import logging
from datetime import date

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError
from app.models import Meal, Review

logger = logging.getLogger(__name__)


def create_meal(db: Session, meal_date: date, menu: str, image_url: str | None = None) -> int:
    """Insert the meal for meal_date and return its id. Raises ConflictError if the date is taken."""
    meal = Meal(date=meal_date, menu=menu, image_url=image_url)
    try:
        db.add(meal)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Meal for %s already exists", meal_date.isoformat())
        raise ConflictError("A meal for this date already exists.") from e
    return meal.id


def delete_meal(db: Session, meal_id: int) -> None:
    """
    Delete a meal and all of its reviews in one transaction.
    Raises NotFoundError if no meal has meal_id.
    """
    meal = db.query(Meal).filter(Meal.id == meal_id).first()
    if meal is None:
        raise NotFoundError("Meal not found.")
    try:
        reviews_deleted = (
            db.query(Review)
            .filter(Review.meal_id == meal_id)
            .delete(synchronize_session=False)
        )
        db.delete(meal)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info("Deleted meal id=%s with %s review(s)", meal_id, reviews_deleted)


def list_meals(db: Session) -> list[Meal]:
    """All meals, newest date first."""
    return db.query(Meal).order_by(Meal.date.desc()).all()


def get_meal_by_date(db: Session, meal_date: date) -> Meal:
    meal = db.query(Meal).filter(Meal.date == meal_date).first()
    if meal is None:
        raise NotFoundError("Meal not found for this date.")
    return meal
