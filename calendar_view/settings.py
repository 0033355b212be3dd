"""Display window configuration for the rendered calendars.

The display window only decides which months are drawn and which days are
dimmed. It is unrelated to the simple work floor used by the calculator.
"""

import os
from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.engine import InvalidDateError, parse_calendar_date

DISPLAY_START_ENV = "CALENDAR_DISPLAY_START"
DISPLAY_END_ENV = "CALENDAR_DISPLAY_END"

DEFAULT_DISPLAY_START = date(2026, 2, 20)
DEFAULT_DISPLAY_END = date(2026, 4, 30)


class SettingsError(ValueError):
    """Raised when display settings cannot be constructed."""


@dataclass(frozen=True)
class DisplaySettings:
    start: date = DEFAULT_DISPLAY_START
    end: date = DEFAULT_DISPLAY_END

    def contains(self, day: date) -> bool:
        return self.start <= day <= self.end

    def to_dict(self) -> dict:
        return {"start": self.start.isoformat(), "end": self.end.isoformat()}


def load_display_settings() -> DisplaySettings:
    """Build DisplaySettings from the environment, falling back to defaults."""

    start = _parse_env_date(DISPLAY_START_ENV, DEFAULT_DISPLAY_START)
    end = _parse_env_date(DISPLAY_END_ENV, DEFAULT_DISPLAY_END)
    if start > end:
        raise SettingsError(
            f"{DISPLAY_START_ENV} ({start.isoformat()}) must not be after "
            f"{DISPLAY_END_ENV} ({end.isoformat()})."
        )
    if start.year != end.year:
        raise SettingsError("Display window must stay within a single year.")
    return DisplaySettings(start=start, end=end)


def _parse_env_date(env_name: str, default: date) -> date:
    raw: Optional[str] = os.getenv(env_name)
    try:
        value = parse_calendar_date(raw)
    except InvalidDateError as exc:
        raise SettingsError(f"{env_name} must be formatted as YYYY-MM-DD.") from exc
    return default if value is None else value
