"""Grid construction tests for the calendar view."""

import unittest
from datetime import date, datetime

from calendar_view.builder import build_calendars, build_month, months_in_window, resolve_inputs
from calendar_view.models import DateInputs, DayCell
from calendar_view.settings import DisplaySettings
from core.models import Classification, WorkKind


class ResolveInputsTests(unittest.TestCase):
    def test_without_toggle_dates_pass_through(self) -> None:
        inputs = resolve_inputs(date(2026, 3, 10), date(2026, 3, 12))

        self.assertEqual(inputs, DateInputs(date(2026, 3, 10), date(2026, 3, 12)))

    def test_toggle_copies_balance_onto_movein(self) -> None:
        inputs = resolve_inputs(date(2026, 3, 10), date(2026, 3, 20), same_date=True)

        self.assertEqual(inputs.balance, date(2026, 3, 10))
        self.assertEqual(inputs.movein, date(2026, 3, 10))

    def test_toggle_falls_back_to_movein(self) -> None:
        inputs = resolve_inputs(None, date(2026, 3, 20), same_date=True)

        self.assertEqual(inputs, DateInputs(date(2026, 3, 20), date(2026, 3, 20)))

    def test_toggle_with_nothing_entered(self) -> None:
        self.assertEqual(resolve_inputs(None, None, same_date=True), DateInputs())

    def test_datetimes_are_normalized(self) -> None:
        inputs = resolve_inputs(datetime(2026, 3, 10, 12, 0), None)

        self.assertEqual(inputs.balance, date(2026, 3, 10))


class BuildCalendarTests(unittest.TestCase):
    def setUp(self) -> None:
        self.today = date(2026, 3, 8)
        self.inputs = DateInputs(balance=date(2026, 3, 10), movein=date(2026, 3, 12))

    def test_default_window_renders_three_months(self) -> None:
        grids = build_calendars(self.inputs, today=self.today)

        self.assertEqual([(grid.year, grid.month) for grid in grids], [(2026, 2), (2026, 3), (2026, 4)])
        self.assertEqual([len(grid.cells) for grid in grids], [28, 31, 30])
        self.assertEqual(grids[1].title, "2026년 3월")
        self.assertEqual(grids[0].weekday_labels[0], "일")

    def test_months_in_window(self) -> None:
        self.assertEqual(
            months_in_window(date(2026, 2, 20), date(2026, 4, 30)),
            ((2026, 2), (2026, 3), (2026, 4)),
        )
        self.assertEqual(
            months_in_window(date(2025, 11, 5), date(2026, 1, 2)),
            ((2025, 11), (2025, 12), (2026, 1)),
        )

    def test_leading_blanks_are_sunday_first(self) -> None:
        february = build_month(2026, 2, self.inputs, self.today)
        april = build_month(2026, 4, self.inputs, self.today)

        self.assertEqual(february.leading_blanks, 0)
        self.assertEqual(april.leading_blanks, 3)
        weeks = list(april.weeks())
        self.assertEqual(len(weeks), 5)
        self.assertTrue(all(len(week) == 7 for week in weeks))
        self.assertEqual(weeks[0][:3], (None, None, None))
        self.assertEqual(weeks[0][3].day, date(2026, 4, 1))

    def test_cells_carry_classification_and_markers(self) -> None:
        march = build_month(2026, 3, self.inputs, self.today)
        cells = {cell.day.day: cell for cell in march.cells}

        self.assertEqual(cells[6].classification.kind, WorkKind.NONE)
        self.assertEqual(cells[7].classification.kind, WorkKind.SIMPLE)
        self.assertEqual(cells[10].classification.kind, WorkKind.FULL)
        self.assertTrue(cells[8].is_today)
        self.assertTrue(cells[10].is_balance)
        self.assertTrue(cells[12].is_movein)
        self.assertIn("simple-day", cells[8].css_classes)
        self.assertIn("today", cells[8].css_classes)
        self.assertIn("balance-day", cells[10].css_classes)
        self.assertIn("full-day", cells[12].css_classes)
        self.assertIn("movein-day", cells[12].css_classes)

    def test_work_kinds_map_to_distinct_classes(self) -> None:
        day = date(2026, 3, 11)
        cases = [
            (Classification(simple=True), "simple-day"),
            (Classification(full=True), "full-day"),
            (Classification(simple=True, full=True), "both-day"),
        ]
        for classification, expected in cases:
            with self.subTest(kind=classification.kind):
                classes = DayCell(day, classification).css_classes
                self.assertEqual(classes, ("day-cell", expected))
        self.assertEqual(DayCell(day, Classification()).css_classes, ("day-cell",))

    def test_weekend_classes(self) -> None:
        march = build_month(2026, 3, DateInputs(), self.today)
        cells = {cell.day.day: cell for cell in march.cells}

        self.assertEqual(cells[1].css_classes, ("day-cell", "sunday"))
        self.assertEqual(cells[7].css_classes, ("day-cell", "saturday"))
        self.assertEqual(cells[4].css_classes, ("day-cell",))

    def test_out_of_range_dims_but_still_highlights(self) -> None:
        inputs = DateInputs(balance=date(2026, 2, 19), movein=date(2026, 2, 19))

        february = build_month(2026, 2, inputs, self.today, DisplaySettings())
        cells = {cell.day.day: cell for cell in february.cells}

        self.assertTrue(cells[18].out_of_range)
        self.assertTrue(cells[18].classification.simple)
        self.assertIn("out-of-range", cells[18].css_classes)
        self.assertIn("simple-day", cells[18].css_classes)
        self.assertFalse(cells[20].out_of_range)

    def test_custom_window(self) -> None:
        settings = DisplaySettings(start=date(2026, 5, 1), end=date(2026, 5, 31))

        grids = build_calendars(self.inputs, today=self.today, settings=settings)

        self.assertEqual(len(grids), 1)
        self.assertTrue(all(cell.classification.full for cell in grids[0].cells))

    def test_to_dict(self) -> None:
        march = build_month(2026, 3, self.inputs, self.today).to_dict()

        self.assertEqual(march["year"], 2026)
        self.assertEqual(march["leading_blanks"], 0)
        ninth = march["days"][8]
        self.assertEqual(ninth["date"], "2026-03-09")
        self.assertEqual(ninth["kind"], "simple")
        self.assertFalse(ninth["full"])


if __name__ == "__main__":
    unittest.main()
