"""Fixed Korean labels for rendering calculator statuses."""

from dataclasses import dataclass

from core.engine import SIMPLE_LEAD_DAYS
from core.models import StatusKind, StatusResult

WEEKDAY_LABELS = ("일", "월", "화", "수", "목", "금", "토")

LEVEL_HIDDEN = "hidden"
LEVEL_INFO = "info"
LEVEL_WARNING = "warning"

LEGEND_LABELS = (
    ("simple-day", "간단 시공 가능"),
    ("full-day", "모든 시공 가능"),
    ("both-day", "간단 + 모든 시공"),
    ("balance-day", "잔금일"),
    ("movein-day", "입주일"),
    ("today", "오늘"),
)


@dataclass(frozen=True)
class StatusMessage:
    level: str
    text: str

    @property
    def visible(self) -> bool:
        return self.level != LEVEL_HIDDEN

    def to_dict(self) -> dict:
        return {"level": self.level, "text": self.text}


def month_title(year: int, month: int) -> str:
    return f"{year}년 {month}월"


def status_message(result: StatusResult) -> StatusMessage:
    """Map a status to the banner shown above the calendars."""

    if result.kind == StatusKind.EMPTY:
        return StatusMessage(LEVEL_HIDDEN, "")
    if result.kind == StatusKind.INCOMPLETE:
        return StatusMessage(LEVEL_INFO, "📅 잔금일과 입주일을 모두 입력해주세요.")
    if result.kind == StatusKind.INVALID:
        return StatusMessage(
            LEVEL_WARNING,
            "⚠️ 잔금일은 입주일보다 늦을 수 없습니다. 날짜를 다시 확인해주세요.",
        )
    if result.kind == StatusKind.INELIGIBLE:
        return StatusMessage(
            LEVEL_WARNING,
            "⚠️ 잔금일과 입주일 간격이 너무 멀어 간단 시공이 불가능합니다. "
            f"(최소 {result.required_lead_days}일 전 확보 필요)",
        )
    if result.kind == StatusKind.ELIGIBLE_SAME_DAY:
        return StatusMessage(
            LEVEL_INFO,
            f"✅ 잔금일과 입주일이 동일합니다. 입주일 {SIMPLE_LEAD_DAYS}일 전부터 간단 시공이 가능합니다.",
        )
    return StatusMessage(
        LEVEL_INFO,
        f"✅ 잔금일과 입주일 간격이 있어 {result.days}일간 간단 시공이 가능합니다.",
    )


def legend_visible(result: StatusResult) -> bool:
    """The legend is shown once both dates are present and correctly ordered."""

    return result.kind in (
        StatusKind.INELIGIBLE,
        StatusKind.ELIGIBLE_SAME_DAY,
        StatusKind.ELIGIBLE_WITH_GAP,
    )
