"""View models for the three-month construction calendar."""

from dataclasses import dataclass
from datetime import date
from typing import Dict, Iterator, List, Optional, Tuple

from core.engine import format_calendar_date
from core.models import Classification, WorkKind

_WORK_CLASSES = {
    WorkKind.SIMPLE: "simple-day",
    WorkKind.FULL: "full-day",
    WorkKind.BOTH: "both-day",
}


@dataclass(frozen=True)
class DateInputs:
    """Immutable snapshot of the two user-supplied dates."""

    balance: Optional[date] = None
    movein: Optional[date] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {
            "balance_date": format_calendar_date(self.balance) if self.balance else None,
            "movein_date": format_calendar_date(self.movein) if self.movein else None,
        }


@dataclass(frozen=True)
class DayCell:
    day: date
    classification: Classification
    out_of_range: bool = False
    is_today: bool = False
    is_balance: bool = False
    is_movein: bool = False

    @property
    def is_sunday(self) -> bool:
        return self.day.weekday() == 6

    @property
    def is_saturday(self) -> bool:
        return self.day.weekday() == 5

    @property
    def css_classes(self) -> Tuple[str, ...]:
        classes: List[str] = ["day-cell"]
        if self.is_sunday:
            classes.append("sunday")
        if self.is_saturday:
            classes.append("saturday")
        if self.out_of_range:
            classes.append("out-of-range")
        work_class = _WORK_CLASSES.get(self.classification.kind)
        if work_class:
            classes.append(work_class)
        if self.is_today:
            classes.append("today")
        if self.is_balance:
            classes.append("balance-day")
        if self.is_movein:
            classes.append("movein-day")
        return tuple(classes)

    def to_dict(self) -> Dict[str, object]:
        return {
            "date": format_calendar_date(self.day),
            "day": self.day.day,
            "simple": self.classification.simple,
            "full": self.classification.full,
            "kind": self.classification.kind.value,
            "out_of_range": self.out_of_range,
            "today": self.is_today,
            "balance": self.is_balance,
            "movein": self.is_movein,
            "classes": list(self.css_classes),
        }


@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int
    title: str
    weekday_labels: Tuple[str, ...]
    leading_blanks: int
    cells: Tuple[DayCell, ...]

    def weeks(self) -> Iterator[Tuple[Optional[DayCell], ...]]:
        """Yield Sunday-first rows of seven, padded with None."""

        slots: List[Optional[DayCell]] = [None] * self.leading_blanks + list(self.cells)
        slots.extend([None] * (-len(slots) % 7))
        for index in range(0, len(slots), 7):
            yield tuple(slots[index : index + 7])

    def to_dict(self) -> Dict[str, object]:
        return {
            "year": self.year,
            "month": self.month,
            "title": self.title,
            "weekdays": list(self.weekday_labels),
            "leading_blanks": self.leading_blanks,
            "days": [cell.to_dict() for cell in self.cells],
        }
