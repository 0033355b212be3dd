from .engine import (
    SIMPLE_FLOOR,
    SIMPLE_LEAD_DAYS,
    InvalidDateError,
    classify,
    format_calendar_date,
    full_work_start,
    is_order_valid,
    normalize_date,
    parse_calendar_date,
    simple_work_window,
    summarize,
)
from .models import (
    Classification,
    ConstructionWindow,
    StatusIssue,
    StatusKind,
    StatusResult,
    WorkKind,
)

__all__ = [
    "SIMPLE_FLOOR",
    "SIMPLE_LEAD_DAYS",
    "Classification",
    "ConstructionWindow",
    "InvalidDateError",
    "StatusIssue",
    "StatusKind",
    "StatusResult",
    "WorkKind",
    "classify",
    "format_calendar_date",
    "full_work_start",
    "is_order_valid",
    "normalize_date",
    "parse_calendar_date",
    "simple_work_window",
    "summarize",
]
