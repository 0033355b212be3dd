"""Command-line front end for the construction window calculator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from typing import List, Optional

from calendar_view.builder import build_calendars, resolve_inputs
from calendar_view.messages import legend_visible, status_message
from calendar_view.models import DateInputs, DayCell, MonthGrid
from calendar_view.settings import SettingsError, load_display_settings
from core.engine import InvalidDateError, classify, parse_calendar_date, summarize
from core.models import WorkKind

logger = logging.getLogger(__name__)

_WORK_MARKS = {
    WorkKind.NONE: " ",
    WorkKind.SIMPLE: "s",
    WorkKind.FULL: "f",
    WorkKind.BOTH: "*",
}


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="construction-calendar")
    parser.add_argument("--verbose", action="store_true")
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify_parser = subparsers.add_parser("classify")
    _add_date_args(classify_parser)
    classify_parser.add_argument("--date", required=True)
    classify_parser.set_defaults(func=_classify)

    summary_parser = subparsers.add_parser("summary")
    _add_date_args(summary_parser)
    summary_parser.set_defaults(func=_summary)

    calendar_parser = subparsers.add_parser("calendar")
    _add_date_args(calendar_parser)
    calendar_parser.add_argument("--today")
    calendar_parser.add_argument("--json", action="store_true")
    calendar_parser.set_defaults(func=_calendar)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )

    try:
        return args.func(args)
    except (InvalidDateError, SettingsError, ValueError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2


def _add_date_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--balance")
    parser.add_argument("--movein")
    parser.add_argument("--same-date", action="store_true")


def _build_inputs(args: argparse.Namespace) -> DateInputs:
    inputs = resolve_inputs(
        parse_calendar_date(args.balance),
        parse_calendar_date(args.movein),
        same_date=args.same_date,
    )
    logger.debug("Using inputs %s", inputs)
    return inputs


def _classify(args: argparse.Namespace) -> int:
    inputs = _build_inputs(args)
    candidate = parse_calendar_date(args.date)
    if candidate is None:
        raise InvalidDateError("--date must not be blank.")
    result = classify(inputs.balance, inputs.movein, candidate)
    print(json.dumps({"date": candidate.isoformat(), **inputs.to_dict(), **result.to_dict()}, indent=2))
    return 0


def _summary(args: argparse.Namespace) -> int:
    inputs = _build_inputs(args)
    result = summarize(inputs.balance, inputs.movein)
    output = {
        "inputs": inputs.to_dict(),
        "status": result.to_dict(),
        "message": status_message(result).to_dict(),
        "legend_visible": legend_visible(result),
    }
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


def _calendar(args: argparse.Namespace) -> int:
    inputs = _build_inputs(args)
    settings = load_display_settings()
    today = parse_calendar_date(args.today) or date.today()
    result = summarize(inputs.balance, inputs.movein)
    grids = build_calendars(inputs, today=today, settings=settings)

    if args.json:
        output = {
            "inputs": inputs.to_dict(),
            "status": result.to_dict(),
            "display_window": settings.to_dict(),
            "months": [grid.to_dict() for grid in grids],
        }
        print(json.dumps(output, indent=2, ensure_ascii=False))
        return 0

    message = status_message(result)
    if message.visible:
        print(message.text)
        print()
    for grid in grids:
        print(_render_month(grid))
        print()
    print("s=간단 시공  f=모든 시공  *=간단+모든  [ ]=잔금일/입주일  ( )=오늘")
    return 0


def _render_cell(cell: Optional[DayCell]) -> str:
    if cell is None:
        return "     "
    mark = _WORK_MARKS[cell.classification.kind]
    text = f"{cell.day.day:>2}{mark}"
    if cell.is_balance or cell.is_movein:
        return f"[{text}]"
    if cell.is_today:
        return f"({text})"
    return f" {text} "


def _render_month(grid: MonthGrid) -> str:
    lines = [grid.title, "".join(f"  {label}  " for label in grid.weekday_labels)]
    for week in grid.weeks():
        lines.append("".join(_render_cell(cell) for cell in week).rstrip())
    return "\n".join(lines)


if __name__ == "__main__":
    raise SystemExit(main())
