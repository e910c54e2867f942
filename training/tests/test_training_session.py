from __future__ import annotations

import unittest

from training.exceptions.errors import NotFoundError
from training.logic.training_session import TrainingSession
from training.models.training_models import Company, Training, TrainingItem


def _training(n: int) -> Training:
    return Training(
        id="t1",
        title="Seguridad",
        items=[TrainingItem(id=f"i{k}", title=f"Doc {k}", url=f"https://docs/{k}") for k in range(n)],
    )


COMPANY = Company(id="c1", name="Acme", cuit="30-1")


class TestTrainingSession(unittest.TestCase):
    def test_progress_counts_distinct_items(self) -> None:
        session = TrainingSession(_training(3), COMPANY)
        self.assertEqual(session.progress, 0)
        self.assertEqual(session.mark_viewed("i0"), "https://docs/0")
        session.mark_viewed("i0")
        self.assertEqual(session.progress, 33)
        session.mark_viewed("i1")
        self.assertEqual(session.progress, 67)
        self.assertFalse(session.is_complete)
        session.mark_viewed("i2")
        self.assertEqual(session.progress, 100)
        self.assertTrue(session.is_complete)

    def test_progress_rounds_half_up(self) -> None:
        session = TrainingSession(_training(8), COMPANY)
        session.mark_viewed("i0")
        self.assertEqual(session.progress, 13)

    def test_unknown_item(self) -> None:
        session = TrainingSession(_training(1), COMPANY)
        with self.assertRaises(NotFoundError):
            session.mark_viewed("nope")
        self.assertFalse(session.is_viewed("nope"))

    def test_training_without_items_is_complete(self) -> None:
        self.assertTrue(TrainingSession(_training(0), COMPANY).is_complete)


if __name__ == "__main__":
    unittest.main()
