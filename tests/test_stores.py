"""Store-level tests that call the service functions with a real session."""

import unittest
from datetime import date

from sqlalchemy.exc import IntegrityError

from app.core.exceptions import ConflictError, InvalidInputError, NotFoundError
from app.core.security import hash_password
from app.models import Review
from app.services.meals import create_meal, delete_meal, get_meal_by_date, list_meals
from app.services.menu_requests import create_menu_request, list_menu_requests
from app.services.reviews import create_review, list_reviews_for_meal
from app.services.users import create_user, get_user_by_username
from tests.support import ApiTestCase


class TestCredentialStore(ApiTestCase):
    def test_create_and_find(self) -> None:
        user_id = create_user(self.db, "ivy9", hash_password("Secret#123", rounds=4))
        user = get_user_by_username(self.db, "ivy9")
        self.assertIsNotNone(user)
        self.assertEqual(user.id, user_id)

    def test_duplicate_is_conflict_and_session_stays_usable(self) -> None:
        create_user(self.db, "ivy9", "hash-a")
        with self.assertRaises(ConflictError):
            create_user(self.db, "ivy9", "hash-b")
        self.assertEqual(get_user_by_username(self.db, "ivy9").password_hash, "hash-a")
        create_user(self.db, "ivy10", "hash-c")

    def test_unknown_username(self) -> None:
        self.assertIsNone(get_user_by_username(self.db, "ghost1"))


class TestMenuStore(ApiTestCase):
    def test_conflict_on_same_date(self) -> None:
        create_meal(self.db, date(2026, 1, 5), "Rice")
        with self.assertRaises(ConflictError):
            create_meal(self.db, date(2026, 1, 5), "Noodles")
        self.assertEqual(get_meal_by_date(self.db, date(2026, 1, 5)).menu, "Rice")

    def test_lookup_and_delete_missing(self) -> None:
        with self.assertRaises(NotFoundError):
            get_meal_by_date(self.db, date(2030, 1, 1))
        with self.assertRaises(NotFoundError):
            delete_meal(self.db, 42)

    def test_list_order(self) -> None:
        create_meal(self.db, date(2026, 1, 1), "A")
        create_meal(self.db, date(2026, 3, 1), "B")
        create_meal(self.db, date(2026, 2, 1), "C")
        self.assertEqual([m.menu for m in list_meals(self.db)], ["B", "C", "A"])


class TestReviewStore(ApiTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.user_id = create_user(self.db, "judy1", "hash")
        self.meal_id = create_meal(self.db, date(2026, 1, 5), "Rice")

    def test_rejects_out_of_range_rating_without_trusting_caller(self) -> None:
        for rating in (0, 6, True, 3.0):
            with self.assertRaises(InvalidInputError):
                create_review(self.db, self.meal_id, self.user_id, rating)  # type: ignore[arg-type]
        self.assertEqual(self.db.query(Review).count(), 0)

    def test_first_write_wins(self) -> None:
        create_review(self.db, self.meal_id, self.user_id, 2)
        with self.assertRaises(ConflictError):
            create_review(self.db, self.meal_id, self.user_id, 5)
        reviews = list_reviews_for_meal(self.db, self.meal_id)
        self.assertEqual([r.rating for r in reviews], [2])

    def test_unknown_meal(self) -> None:
        with self.assertRaises(NotFoundError):
            create_review(self.db, self.meal_id + 100, self.user_id, 3)

    def test_unknown_user_is_not_reported_as_duplicate(self) -> None:
        with self.assertRaises(IntegrityError):
            create_review(self.db, self.meal_id, self.user_id + 100, 3)
        self.assertEqual(self.db.query(Review).count(), 0)
        # Session is usable again after the rollback.
        create_review(self.db, self.meal_id, self.user_id, 3)

    def test_delete_meal_removes_reviews(self) -> None:
        create_review(self.db, self.meal_id, self.user_id, 4)
        delete_meal(self.db, self.meal_id)
        self.assertEqual(list_reviews_for_meal(self.db, self.meal_id), [])


class TestRequestStore(ApiTestCase):
    def test_append_and_list(self) -> None:
        first = create_menu_request(self.db, date(2026, 1, 3), "Larb")
        second = create_menu_request(self.db, date(2026, 1, 3), "Larb")
        self.assertNotEqual(first, second)
        create_menu_request(self.db, date(2026, 1, 10), "Som tam")
        self.assertEqual(
            [r.requested_menu for r in list_menu_requests(self.db)], ["Som tam", "Larb", "Larb"]
        )


if __name__ == "__main__":
    unittest.main()
