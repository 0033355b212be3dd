from .builder import build_calendars, build_month, months_in_window, resolve_inputs
from .messages import StatusMessage, legend_visible, month_title, status_message
from .models import DateInputs, DayCell, MonthGrid
from .settings import DisplaySettings, SettingsError, load_display_settings

__all__ = [
    "DateInputs",
    "DayCell",
    "DisplaySettings",
    "MonthGrid",
    "SettingsError",
    "StatusMessage",
    "build_calendars",
    "build_month",
    "legend_visible",
    "load_display_settings",
    "month_title",
    "months_in_window",
    "resolve_inputs",
    "status_message",
]
