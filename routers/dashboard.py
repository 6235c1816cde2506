import html

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse, JSONResponse

from analysis import appointment_status_summary, dashboard_stats, next_appointment, symptom_summary
from config import _today_local
from routers.records_utils import _appointment_store, _symptom_store
from ui import PAGE_STYLE, _format_date, _format_time, _nav_bar, _severity_color, _status_badge

router = APIRouter()


def _stat(value, label: str) -> str:
    return (
        f'<div class="stat"><div class="stat-value">{html.escape(str(value))}</div>'
        f'<div class="stat-label">{label}</div></div>'
    )


def _summary_rows(summary: dict) -> str:
    if not summary:
        return '<p class="empty">No symptoms recorded yet.</p>'
    rows = []
    for label, data in summary.items():
        avg = data["average_severity"]
        rows.append(
            "<tr>"
            f"<td>{html.escape(label)}</td>"
            f"<td>{data['count']}</td>"
            f'<td><span style="color:{_severity_color(avg)};font-weight:700;">{avg}/10</span></td>'
            f"<td>{html.escape(_format_date(data['last_occurrence_date']))}</td>"
            "</tr>"
        )
    return (
        "<table><thead><tr><th>Symptom</th><th>Occurrences</th><th>Avg severity</th>"
        f"<th>Last</th></tr></thead><tbody>{''.join(rows)}</tbody></table>"
    )


def _status_html(counts: dict, upcoming) -> str:
    if not counts:
        return '<p class="empty">No appointments scheduled yet.</p>'
    parts = " ".join(f"{_status_badge(status)} {n}" for status, n in counts.items())
    if upcoming:
        parts += (
            '<p style="margin:12px 0 0;font-size:14px;"><strong>Next appointment:</strong> '
            f"{html.escape(upcoming['doctor'])} &middot; "
            f"{html.escape(_format_date(upcoming['date']))} at {html.escape(_format_time(upcoming['time']))}"
            f"<br><span style=\"color:#6b7280;\">{html.escape(upcoming['reason'] or '')}</span></p>"
        )
    return parts


@router.get("/", response_class=HTMLResponse)
def home(request: Request):
    symptoms, appointments = _symptom_store(request), _appointment_store(request)
    today = _today_local()
    stats = dashboard_stats(symptoms, appointments, today=today)
    return f"""<!DOCTYPE html>
<html>
<head>{PAGE_STYLE}</head>
<body>
  {_nav_bar('home')}
  <div class="container">
    <h1>Dashboard</h1>
    <div class="stats">
      {_stat(stats['total_symptoms'], 'Symptoms logged')}
      {_stat(stats['average_severity'], 'Avg severity')}
      {_stat(stats['upcoming_appointments'], 'Upcoming appointments')}
      {_stat(stats['days_tracked'], 'Days tracked')}
    </div>
    <div class="card">
      <h3 style="margin-top:0;">Symptom summary</h3>
      {_summary_rows(symptom_summary(symptoms))}
    </div>
    <div class="card">
      <h3 style="margin-top:0;">Appointment status</h3>
      {_status_html(appointment_status_summary(appointments), next_appointment(appointments, today=today))}
    </div>
  </div>
</body>
</html>"""


@router.get("/api/dashboard")
def api_dashboard(request: Request):
    stats = dashboard_stats(_symptom_store(request), _appointment_store(request), today=_today_local())
    return JSONResponse(stats)
