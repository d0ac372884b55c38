"""Initial schema: users, meals, reviews, menu_requests.

Revision ID: 20261017000000
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20261017000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=20), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_users")),
    )
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)

    op.create_table(
        "meals",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("menu", sa.Text(), nullable=False),
        sa.Column("image_url", sa.String(length=2048), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_meals")),
    )
    op.create_index(op.f("ix_meals_date"), "meals", ["date"], unique=True)

    op.create_table(
        "reviews",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("meal_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text(), nullable=True),
        sa.CheckConstraint(
            "rating BETWEEN 1 AND 5", name=op.f("ck_reviews_rating_range")
        ),
        sa.ForeignKeyConstraint(
            ["meal_id"],
            ["meals.id"],
            name=op.f("fk_reviews_meal_id_meals"),
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name=op.f("fk_reviews_user_id_users"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_reviews")),
        sa.UniqueConstraint("meal_id", "user_id", name="uq_reviews_meal_id_user_id"),
    )
    op.create_index(op.f("ix_reviews_meal_id"), "reviews", ["meal_id"], unique=False)

    op.create_table(
        "menu_requests",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("request_date", sa.Date(), nullable=False),
        sa.Column("requested_menu", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_menu_requests")),
    )
    op.create_index(
        op.f("ix_menu_requests_request_date"),
        "menu_requests",
        ["request_date"],
        unique=False,
    )


def downgrade() -> None:
    op.drop_index(op.f("ix_menu_requests_request_date"), table_name="menu_requests")
    op.drop_table("menu_requests")
    op.drop_index(op.f("ix_reviews_meal_id"), table_name="reviews")
    op.drop_table("reviews")
    op.drop_index(op.f("ix_meals_date"), table_name="meals")
    op.drop_table("meals")
    op.drop_index(op.f("ix_users_username"), table_name="users")
    op.drop_table("users")
