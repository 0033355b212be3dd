"""Builds month grids from a snapshot of the two input dates."""

import calendar
from datetime import date
from typing import List, Optional, Tuple

from core.engine import classify, normalize_date

from .messages import WEEKDAY_LABELS, month_title
from .models import DateInputs, DayCell, MonthGrid
from .settings import DisplaySettings


def resolve_inputs(
    balance: Optional[date],
    movein: Optional[date],
    same_date: bool = False,
) -> DateInputs:
    """Apply the same-date toggle and return an immutable snapshot.

    With the toggle on, the balance date wins when present; otherwise the
    move-in date is copied back onto the balance date.
    """

    balance = normalize_date(balance)
    movein = normalize_date(movein)
    if same_date:
        if balance is not None:
            movein = balance
        elif movein is not None:
            balance = movein
    return DateInputs(balance=balance, movein=movein)


def months_in_window(start: date, end: date) -> Tuple[Tuple[int, int], ...]:
    """Return (year, month) pairs touched by the inclusive window."""

    months: List[Tuple[int, int]] = []
    year, month = start.year, start.month
    while (year, month) <= (end.year, end.month):
        months.append((year, month))
        year, month = (year + 1, 1) if month == 12 else (year, month + 1)
    return tuple(months)


def _leading_blanks(year: int, month: int) -> int:
    # calendar.weekday is Monday-first; the grid is Sunday-first.
    return (calendar.weekday(year, month, 1) + 1) % 7


def build_month(
    year: int,
    month: int,
    inputs: DateInputs,
    today: date,
    settings: Optional[DisplaySettings] = None,
) -> MonthGrid:
    """Classify every day of one month and attach display markers."""

    settings = settings or DisplaySettings()
    _, days_in_month = calendar.monthrange(year, month)
    cells = []
    for day_number in range(1, days_in_month + 1):
        day = date(year, month, day_number)
        cells.append(
            DayCell(
                day=day,
                classification=classify(inputs.balance, inputs.movein, day),
                out_of_range=not settings.contains(day),
                is_today=day == today,
                is_balance=day == inputs.balance,
                is_movein=day == inputs.movein,
            )
        )

    return MonthGrid(
        year=year,
        month=month,
        title=month_title(year, month),
        weekday_labels=WEEKDAY_LABELS,
        leading_blanks=_leading_blanks(year, month),
        cells=tuple(cells),
    )


def build_calendars(
    inputs: DateInputs,
    today: Optional[date] = None,
    settings: Optional[DisplaySettings] = None,
) -> Tuple[MonthGrid, ...]:
    """Build one grid per month of the display window."""

    settings = settings or DisplaySettings()
    today = normalize_date(today) or date.today()
    return tuple(
        build_month(year, month, inputs, today, settings)
        for year, month in months_in_window(settings.start, settings.end)
    )
