"""Local FastAPI shell for the construction window calendar."""

from __future__ import annotations

import html
import logging
from datetime import date
from typing import Iterable, Optional

from fastapi import FastAPI, Form, Query, Request
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel

from calendar_view.builder import build_calendars, resolve_inputs
from calendar_view.messages import (
    LEGEND_LABELS,
    StatusMessage,
    legend_visible,
    status_message,
)
from calendar_view.models import DateInputs, MonthGrid
from calendar_view.settings import DisplaySettings, SettingsError, load_display_settings
from core.engine import InvalidDateError, classify, parse_calendar_date, summarize
from core.models import StatusResult

logger = logging.getLogger(__name__)

app = FastAPI(title="Construction Calendar", description="Simple and full work windows")


class DatesRequest(BaseModel):
    balance_date: Optional[str] = None
    movein_date: Optional[str] = None
    same_date: bool = False


async def _handle_errors(request: Request, exc: Exception):
    logger.warning("Rejected request to %s: %s", request.url.path, exc)
    return JSONResponse({"error": str(exc)}, status_code=400)


for _exc_class in (InvalidDateError, SettingsError, ValueError):
    app.add_exception_handler(_exc_class, _handle_errors)


@app.get("/", response_class=HTMLResponse)
async def calendar_page(
    balance: Optional[str] = None,
    movein: Optional[str] = None,
    same_date: bool = False,
) -> HTMLResponse:
    return HTMLResponse(_render_page(balance, movein, same_date))


@app.post("/calculate", response_class=HTMLResponse)
async def calculate(
    balance_date: Optional[str] = Form(None),
    movein_date: Optional[str] = Form(None),
    same_date: Optional[str] = Form(None),
) -> HTMLResponse:
    return HTMLResponse(_render_page(balance_date, movein_date, same_date not in (None, "")))


@app.get("/api/classify")
async def classify_day(
    day: str = Query(..., alias="date"),
    balance: Optional[str] = None,
    movein: Optional[str] = None,
):
    candidate = parse_calendar_date(day)
    if candidate is None:
        raise InvalidDateError("date is required.")
    inputs = _snapshot(balance, movein, same_date=False)
    result = classify(inputs.balance, inputs.movein, candidate)
    return {"date": candidate.isoformat(), **inputs.to_dict(), **result.to_dict()}


@app.post("/api/summary")
async def summary(payload: DatesRequest):
    inputs = _snapshot(payload.balance_date, payload.movein_date, payload.same_date)
    result = summarize(inputs.balance, inputs.movein)
    return _status_payload(inputs, result)


@app.post("/api/calendar")
async def calendar_data(payload: DatesRequest):
    settings = load_display_settings()
    inputs = _snapshot(payload.balance_date, payload.movein_date, payload.same_date)
    result = summarize(inputs.balance, inputs.movein)
    grids = build_calendars(inputs, today=_today(), settings=settings)
    response = _status_payload(inputs, result)
    response["display_window"] = settings.to_dict()
    response["months"] = [grid.to_dict() for grid in grids]
    return response


@app.get("/api/settings")
async def display_settings():
    return load_display_settings().to_dict()


def _today() -> date:
    return date.today()


def _snapshot(balance: Optional[str], movein: Optional[str], same_date: bool) -> DateInputs:
    inputs = resolve_inputs(
        parse_calendar_date(balance),
        parse_calendar_date(movein),
        same_date=same_date,
    )
    logger.debug("Recomputing windows for %s", inputs)
    return inputs


def _status_payload(inputs: DateInputs, result: StatusResult) -> dict:
    return {
        "inputs": inputs.to_dict(),
        "status": result.to_dict(),
        "message": status_message(result).to_dict(),
        "legend_visible": legend_visible(result),
    }


def _render_page(
    balance_raw: Optional[str],
    movein_raw: Optional[str],
    same_date: bool,
) -> str:
    settings = load_display_settings()
    try:
        inputs = _snapshot(balance_raw, movein_raw, same_date)
    except InvalidDateError as exc:
        logger.warning("Ignoring unreadable date input: %s", exc)
        inputs = DateInputs()
        message = StatusMessage("warning", f"⚠️ {exc}")
        show_legend = False
    else:
        result = summarize(inputs.balance, inputs.movein)
        message = status_message(result)
        show_legend = legend_visible(result)

    grids = build_calendars(inputs, today=_today(), settings=settings)
    return _render_document(
        inputs=inputs,
        same_date=same_date,
        message=message,
        show_legend=show_legend,
        grids=grids,
        settings=settings,
    )


def _render_month(grid: MonthGrid) -> str:
    headers = "".join(f"<span>{html.escape(label)}</span>" for label in grid.weekday_labels)
    cells = ['<div class="day-cell empty"></div>'] * grid.leading_blanks
    for cell in grid.cells:
        classes = " ".join(cell.css_classes)
        cells.append(
            f'<div class="{classes}" data-date="{cell.day.isoformat()}">{cell.day.day}</div>'
        )
    return f"""
      <div class="calendar" id="cal-{grid.year}-{grid.month:02d}">
        <div class="month-title">{html.escape(grid.title)}</div>
        <div class="weekday-header">{headers}</div>
        <div class="days-grid">{''.join(cells)}</div>
      </div>"""


def _render_legend(visible: bool) -> str:
    items = "".join(
        f'<li><span class="swatch {css}"></span>{html.escape(label)}</li>'
        for css, label in LEGEND_LABELS
    )
    state = "legend-section show" if visible else "legend-section"
    return f'<section class="{state}"><ul>{items}</ul></section>'


def _input_value(value: Optional[date]) -> str:
    return value.isoformat() if value else ""


def _render_document(
    *,
    inputs: DateInputs,
    same_date: bool,
    message: StatusMessage,
    show_legend: bool,
    grids: Iterable[MonthGrid],
    settings: DisplaySettings,
) -> str:
    checked = " checked" if same_date else ""
    status_class = f"status-message show {message.level}" if message.visible else "status-message"
    months = "".join(_render_month(grid) for grid in grids)
    return f"""<!DOCTYPE html>
<html data-theme="day">
<head>
  <meta charset="UTF-8" />
  <title>시공 가능일 계산기</title>
  <style>
    :root {{
      color-scheme: light dark;
      --bg: #f7f8fb;
      --text: #0b0d12;
      --panel: #ffffff;
      --border: #d3d8e0;
      --blue: #1f5fbf;
      --gold: #c28a10;
      --muted: #596273;
      --simple: rgba(43, 122, 55, 0.22);
      --full: rgba(31, 95, 191, 0.22);
      --both: linear-gradient(135deg, rgba(43, 122, 55, 0.3) 50%, rgba(31, 95, 191, 0.3) 50%);
    }}
    [data-theme="night"] {{
      --bg: #0b1118;
      --text: #f1f4f8;
      --panel: #121a24;
      --border: #2a3340;
      --blue: #5aa2ff;
      --gold: #f3b43f;
      --muted: #a5b0c2;
    }}
    * {{ box-sizing: border-box; }}
    body {{
      font-family: "Segoe UI", "Helvetica Neue", Arial, sans-serif;
      margin: 0;
      background: var(--bg);
      color: var(--text);
      line-height: 1.5;
    }}
    header {{ padding: 1.5rem 2rem 0.5rem; display: flex; justify-content: space-between; align-items: center; }}
    main {{ padding: 0 2rem 2rem; max-width: 1100px; margin: 0 auto; }}
    .panel {{
      background: var(--panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 1.5rem;
      margin-bottom: 1.5rem;
    }}
    label {{ font-weight: 600; margin-right: 0.5rem; }}
    button {{
      border: none;
      border-radius: 8px;
      padding: 0.5rem 1.1rem;
      font-weight: 600;
      background: var(--blue);
      color: white;
      cursor: pointer;
    }}
    .toggle {{ display: inline-flex; align-items: center; gap: 0.5rem; font-weight: 600; }}
    .muted {{ color: var(--muted); }}
    .status-message {{ display: none; padding: 0.75rem 1rem; border-radius: 8px; margin-bottom: 1rem; }}
    .status-message.show {{ display: block; }}
    .status-message.info {{ background: var(--full); }}
    .status-message.warning {{ background: rgba(194, 138, 16, 0.15); color: var(--gold); font-weight: 600; }}
    .legend-section {{ display: none; }}
    .legend-section.show {{ display: block; }}
    .legend-section ul {{ display: flex; flex-wrap: wrap; gap: 1rem; list-style: none; padding: 0; }}
    .swatch {{ display: inline-block; width: 1rem; height: 1rem; margin-right: 0.35rem; border-radius: 4px; vertical-align: middle; }}
    .calendars {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(280px, 1fr)); gap: 1rem; }}
    .month-title {{ font-weight: 700; font-size: 1.1rem; margin-bottom: 0.5rem; }}
    .weekday-header, .days-grid {{ display: grid; grid-template-columns: repeat(7, 1fr); text-align: center; gap: 2px; }}
    .weekday-header span {{ font-size: 0.8rem; color: var(--muted); }}
    .day-cell {{ padding: 0.4rem 0; border-radius: 6px; border: 2px solid transparent; }}
    .day-cell.sunday {{ color: #c0392b; }}
    .day-cell.saturday {{ color: var(--blue); }}
    .day-cell.out-of-range {{ opacity: 0.4; }}
    .simple-day {{ background: var(--simple); }}
    .full-day {{ background: var(--full); }}
    .both-day {{ background: var(--both); }}
    .today {{ text-decoration: underline; font-weight: 700; }}
    .balance-day {{ border-color: var(--gold); }}
    .movein-day {{ border-color: #2b7a37; }}
  </style>
</head>
<body data-theme="day">
  <header>
    <div>
      <h1>시공 가능일 계산기</h1>
      <div class="muted">표시 기간 {settings.start.isoformat()} ~ {settings.end.isoformat()}</div>
    </div>
    <label class="toggle">
      Night mode
      <input id="themeToggle" type="checkbox" aria-label="Toggle night mode" />
    </label>
  </header>
  <main>
    <section class="panel">
      <form action="/calculate" method="post">
        <label for="balance-date">잔금일</label>
        <input id="balance-date" type="date" name="balance_date" value="{_input_value(inputs.balance)}" />
        <label for="movein-date">입주일</label>
        <input id="movein-date" type="date" name="movein_date" value="{_input_value(inputs.movein)}" />
        <label class="toggle">
          <input id="same-date-check" type="checkbox" name="same_date" value="1"{checked} />
          잔금일과 입주일이 같아요
        </label>
        <button type="submit">계산</button>
      </form>
    </section>
    <div id="status-message" class="{status_class}">{html.escape(message.text)}</div>
    {_render_legend(show_legend)}
    <section class="panel calendars">{months}
    </section>
  </main>
  <script>
    (function() {{
      var key = 'construction-calendar-theme';
      var root = document.documentElement;
      var toggle = document.getElementById('themeToggle');
      function apply(theme) {{
        root.setAttribute('data-theme', theme);
        if (document.body) document.body.setAttribute('data-theme', theme);
        if (toggle) toggle.checked = theme === 'night';
      }}
      var theme = 'day';
      try {{
        var stored = localStorage.getItem(key);
        if (stored) theme = stored;
      }} catch (err) {{}}
      apply(theme);
      if (toggle) {{
        toggle.onchange = function() {{
          var next = toggle.checked ? 'night' : 'day';
          apply(next);
          try {{ localStorage.setItem(key, next); }} catch (err) {{}}
        }};
      }}
    }})();
  </script>
</body>
</html>"""
