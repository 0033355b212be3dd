"""Pure computation engine for construction work windows."""

from datetime import date, datetime, timedelta
from typing import Optional, Union

from .models import (
    Classification,
    ConstructionWindow,
    StatusIssue,
    StatusKind,
    StatusResult,
)

SIMPLE_FLOOR = date(2026, 2, 18)
SIMPLE_LEAD_DAYS = 5

_NOT_ELIGIBLE = Classification(simple=False, full=False)


class InvalidDateError(ValueError):
    """Raised when date text cannot be read as a calendar date."""


def normalize_date(value: Optional[Union[date, datetime]]) -> Optional[date]:
    """Drop any time-of-day component so comparisons happen on whole days."""

    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    return value


def parse_calendar_date(text: Optional[str]) -> Optional[date]:
    """Parse ``YYYY-MM-DD``; blank input means the date was not supplied."""

    if text is None or not text.strip():
        return None
    raw = text.strip()
    try:
        year, month, day = (int(part) for part in raw.split("-"))
        return date(year, month, day)
    except ValueError as exc:
        raise InvalidDateError(f"Invalid date '{raw}'; expected YYYY-MM-DD.") from exc


def format_calendar_date(day: date) -> str:
    return day.isoformat()


def is_order_valid(balance_date: Optional[date], movein_date: Optional[date]) -> bool:
    """True when both dates exist and the balance date is not after move-in."""

    balance = normalize_date(balance_date)
    movein = normalize_date(movein_date)
    if balance is None or movein is None:
        return False
    return balance <= movein


def simple_work_window(balance_date: date, movein_date: date) -> ConstructionWindow:
    """Return the simple work span, clamped to the floor; may be empty."""

    balance = normalize_date(balance_date)
    movein = normalize_date(movein_date)
    lead = timedelta(days=SIMPLE_LEAD_DAYS)
    start = SIMPLE_FLOOR if movein <= SIMPLE_FLOOR + lead else movein - lead
    # date.min has no previous day; start is at least the floor, so the span is empty.
    end = balance if balance == date.min else balance - timedelta(days=1)
    return ConstructionWindow(start=start, end=end)


def full_work_start(balance_date: date) -> date:
    """Full work is allowed from the balance date itself onward."""

    return normalize_date(balance_date)


def classify(
    balance_date: Optional[date],
    movein_date: Optional[date],
    candidate: date,
) -> Classification:
    """Classify one calendar day against both work windows."""

    if not is_order_valid(balance_date, movein_date):
        return _NOT_ELIGIBLE

    day = normalize_date(candidate)
    window = simple_work_window(balance_date, movein_date)
    return Classification(
        simple=window.contains(day),
        full=day >= full_work_start(balance_date),
    )


def summarize(balance_date: Optional[date], movein_date: Optional[date]) -> StatusResult:
    """Derive the status of a pair of input dates without formatting it."""

    balance = normalize_date(balance_date)
    movein = normalize_date(movein_date)

    if balance is None and movein is None:
        return StatusResult(
            kind=StatusKind.EMPTY,
            issue=StatusIssue.MISSING_INPUT,
            missing=("balance", "movein"),
        )
    if balance is None or movein is None:
        return StatusResult(
            kind=StatusKind.INCOMPLETE,
            issue=StatusIssue.MISSING_INPUT,
            missing=("balance",) if balance is None else ("movein",),
        )
    if balance > movein:
        return StatusResult(kind=StatusKind.INVALID, issue=StatusIssue.ORDER_VIOLATION)

    window = simple_work_window(balance, movein)
    full_start = full_work_start(balance)

    if not window.is_valid:
        return StatusResult(
            kind=StatusKind.INELIGIBLE,
            issue=StatusIssue.WINDOW_EMPTY,
            window=window,
            full_start=full_start,
            required_lead_days=SIMPLE_LEAD_DAYS,
        )

    kind = StatusKind.ELIGIBLE_SAME_DAY if balance == movein else StatusKind.ELIGIBLE_WITH_GAP
    return StatusResult(kind=kind, window=window, full_start=full_start)
