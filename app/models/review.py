"""ORM model for a user's rating of a meal."""

from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, Text, UniqueConstraint

from app.models.base import Base


class Review(Base):
    """
    A single 1-5 vote by one user for one meal.

    At most one row per (meal_id, user_id); the database constraint decides races.
    """

    __tablename__ = "reviews"
    __table_args__ = (
        UniqueConstraint("meal_id", "user_id", name="uq_reviews_meal_id_user_id"),
        CheckConstraint("rating BETWEEN 1 AND 5", name="rating_range"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    meal_id = Column(
        Integer,
        ForeignKey("meals.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    rating = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
