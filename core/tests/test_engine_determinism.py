"""Determinism tests for the core engine."""

import os
import unittest
from datetime import date

from core.engine import classify, summarize


class ConstructionEngineDeterminismTests(unittest.TestCase):
    def test_same_input_same_output(self) -> None:
        balance = date(2026, 3, 10)
        movein = date(2026, 3, 12)

        first = summarize(balance, movein)
        second = summarize(balance, movein)

        self.assertEqual(first, second)
        self.assertEqual(first.to_dict(), second.to_dict())

    def test_call_order_does_not_change_output(self) -> None:
        balance = date(2026, 3, 10)
        movein = date(2026, 3, 12)
        days = [date(2026, 3, day) for day in range(1, 32)]

        forward = [classify(balance, movein, day) for day in days]
        summarize(date(2026, 4, 1), date(2026, 3, 1))
        backward = [classify(balance, movein, day) for day in reversed(days)]

        self.assertEqual(forward, list(reversed(backward)))

    def test_environment_changes_do_not_affect_output(self) -> None:
        balance = date(2026, 3, 24)
        movein = date(2026, 3, 29)

        baseline = summarize(balance, movein).to_dict()
        os.environ["CALENDAR_DISPLAY_START"] = "2026-01-01"
        self.addCleanup(os.environ.pop, "CALENDAR_DISPLAY_START", None)

        after = summarize(balance, movein).to_dict()

        self.assertEqual(baseline, after)


if __name__ == "__main__":
    unittest.main()
