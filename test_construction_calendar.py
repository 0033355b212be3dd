"""Unit tests for the construction calendar report using unittest."""

import unittest
from contextlib import redirect_stdout
from datetime import date
from io import StringIO

from construction_calendar import DateInputs, StatusKind, classify, print_report, run_example, summarize


class ConstructionCalendarReportTests(unittest.TestCase):
    def _capture(self, func, *args) -> str:
        buf = StringIO()
        with redirect_stdout(buf):
            func(*args)
        return buf.getvalue()

    # Worked example has a three day simple window before the balance date.
    def test_run_example(self) -> None:
        output = self._capture(run_example)

        self.assertIn("Status: ELIGIBLE_WITH_GAP", output)
        self.assertIn("Simple work: 2026-03-07 .. 2026-03-09 (3 days)", output)
        self.assertIn("Full work: from 2026-03-10", output)

    # Lead time too short leaves only full work.
    def test_report_without_simple_window(self) -> None:
        output = self._capture(print_report, DateInputs(date(2026, 3, 24), date(2026, 3, 29)))

        self.assertIn("Status: INELIGIBLE", output)
        self.assertIn("Simple work: not available", output)
        self.assertIn("Full work: from 2026-03-24", output)

    # Reversed dates report no windows at all.
    def test_report_order_violation(self) -> None:
        output = self._capture(print_report, DateInputs(date(2026, 3, 10), date(2026, 3, 5)))

        self.assertIn("Status: INVALID", output)
        self.assertNotIn("Simple work", output)
        self.assertNotIn("Full work", output)

    def test_report_with_missing_date(self) -> None:
        output = self._capture(print_report, DateInputs(balance=date(2026, 3, 10)))

        self.assertIn("Move-in date: -", output)
        self.assertIn("Status: INCOMPLETE", output)

    def test_public_exports(self) -> None:
        self.assertEqual(summarize(None, None).kind, StatusKind.EMPTY)
        self.assertTrue(classify(date(2026, 3, 10), date(2026, 3, 10), date(2026, 3, 5)).simple)


if __name__ == "__main__":
    unittest.main()
