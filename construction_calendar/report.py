"""Construction Calendar
=======================

Console summary of the simple and full work windows for one pair of
balance and move-in dates. Run as a script for a worked example.
"""

from datetime import date

from calendar_view.messages import status_message
from calendar_view.models import DateInputs
from core.engine import classify, format_calendar_date, simple_work_window, summarize
from core.models import StatusKind


def _format_date(value) -> str:
    return format_calendar_date(value) if value is not None else "-"


def print_report(inputs: DateInputs) -> None:
    """Render a human-readable window report."""

    result = summarize(inputs.balance, inputs.movein)

    print("Construction Calendar - Work Window Check")
    print("=" * 60)
    print(f"Balance date: {_format_date(inputs.balance)}")
    print(f"Move-in date: {_format_date(inputs.movein)}")
    print(f"Status: {result.kind.value}")

    if result.window is not None:
        window = result.window
        if window.is_valid:
            print(
                f"Simple work: {window.start.isoformat()} .. {window.end.isoformat()} "
                f"({window.day_count} days)"
            )
        else:
            print("Simple work: not available")
    if result.full_start is not None:
        print(f"Full work: from {result.full_start.isoformat()}")

    message = status_message(result)
    if message.visible:
        print()
        print(message.text)


def run_example() -> None:
    """Execute a realistic example when run as a script."""

    example = DateInputs(balance=date(2026, 3, 10), movein=date(2026, 3, 12))
    print_report(example)


if __name__ == "__main__":
    run_example()
