"""Domain schemas for the construction window calculator."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Dict, Optional, Tuple


class WorkKind(Enum):
    NONE = "none"
    SIMPLE = "simple"
    FULL = "full"
    BOTH = "both"


class StatusKind(Enum):
    EMPTY = "EMPTY"
    INCOMPLETE = "INCOMPLETE"
    INVALID = "INVALID"
    INELIGIBLE = "INELIGIBLE"
    ELIGIBLE_SAME_DAY = "ELIGIBLE_SAME_DAY"
    ELIGIBLE_WITH_GAP = "ELIGIBLE_WITH_GAP"


class StatusIssue(Enum):
    MISSING_INPUT = "MISSING_INPUT"
    ORDER_VIOLATION = "ORDER_VIOLATION"
    WINDOW_EMPTY = "WINDOW_EMPTY"


@dataclass(frozen=True)
class ConstructionWindow:
    """Inclusive date span; empty when start falls after end."""

    start: date
    end: date

    @property
    def is_valid(self) -> bool:
        return self.start <= self.end

    @property
    def day_count(self) -> int:
        if not self.is_valid:
            return 0
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        return self.is_valid and self.start <= day <= self.end

    def to_dict(self) -> Dict[str, object]:
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "valid": self.is_valid,
            "days": self.day_count,
        }


@dataclass(frozen=True)
class Classification:
    """Per-day eligibility; a day may be simple, full, both, or neither."""

    simple: bool = False
    full: bool = False

    @property
    def kind(self) -> WorkKind:
        if self.simple and self.full:
            return WorkKind.BOTH
        if self.simple:
            return WorkKind.SIMPLE
        if self.full:
            return WorkKind.FULL
        return WorkKind.NONE

    def to_dict(self) -> Dict[str, object]:
        return {"simple": self.simple, "full": self.full, "kind": self.kind.value}


@dataclass(frozen=True)
class StatusResult:
    """Structured outcome of summarizing a pair of input dates."""

    kind: StatusKind
    issue: Optional[StatusIssue] = None
    missing: Tuple[str, ...] = ()
    window: Optional[ConstructionWindow] = None
    full_start: Optional[date] = None
    required_lead_days: Optional[int] = None

    @property
    def is_eligible(self) -> bool:
        return self.kind in (StatusKind.ELIGIBLE_SAME_DAY, StatusKind.ELIGIBLE_WITH_GAP)

    @property
    def days(self) -> Optional[int]:
        if self.window is None or not self.is_eligible:
            return None
        return self.window.day_count

    def to_dict(self) -> Dict[str, object]:
        result: Dict[str, object] = {
            "kind": self.kind.value,
            "eligible": self.is_eligible,
        }

        if self.issue is not None:
            result["issue"] = self.issue.value
        if self.missing:
            result["missing"] = list(self.missing)
        if self.window is not None:
            result["simple_window"] = self.window.to_dict()
        if self.days is not None:
            result["days"] = self.days
        if self.full_start is not None:
            result["full_start"] = self.full_start.isoformat()
        if self.required_lead_days is not None:
            result["required_lead_days"] = self.required_lead_days

        return result
