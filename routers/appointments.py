import html
import logging
from urllib.parse import quote_plus

from fastapi import APIRouter, Body, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from analysis import appointment_status_summary, next_appointment
from config import UPCOMING_WINDOW_DAYS, _today_local
from directory import all_specialties, doctors_by_specialty
from routers.records_utils import (
    _appointment_store, _check_date, _check_time, _clean_str, _error_html, _persist_appointments,
)
from store import APPOINTMENT_STATUSES, STATUS_CANCELLED
from ui import PAGE_STYLE, _format_date, _format_time, _nav_bar, _status_badge

router = APIRouter()
logger = logging.getLogger(__name__)

_REQUIRED_FIELDS = {"doctor": "Doctor", "specialty": "Specialty", "date": "Date", "time": "Time"}


def _validate_appointment_payload(payload: dict, partial: bool = False):
    """Return ``(error, data)``; presence checks plus date/time/status format."""
    data = {}
    for key, label in _REQUIRED_FIELDS.items():
        if key in payload or not partial:
            value = _clean_str(payload.get(key))
            if not value:
                return (f"{label} is required", None)
            data[key] = value
    for key in ("patient", "reason"):
        if key in payload or not partial:
            data[key] = _clean_str(payload.get(key))
    if "date" in data:
        error = _check_date(data["date"])
        if error:
            return (error, None)
    if "time" in data:
        error = _check_time(data["time"])
        if error:
            return (error, None)
    status = _clean_str(payload.get("status"))
    if status:
        if status not in APPOINTMENT_STATUSES:
            return ("Unknown appointment status", None)
        data["status"] = status
    return ("", data)


def _appointment_rows(items: list) -> str:
    if not items:
        return '<tr><td colspan="7" class="empty">No appointments scheduled yet.</td></tr>'
    rows = []
    for a in reversed(items):
        cancel_html = ""
        if a["status"] != STATUS_CANCELLED:
            cancel_html = (
                f'<form method="post" action="/appointments/{a["id"]}/cancel" style="margin:0;"'
                ' onsubmit="return confirm(\'Cancel this appointment?\');">'
                '<button class="btn-delete" type="submit">Cancel</button></form>'
            )
        rows.append(
            "<tr>"
            f"<td>{html.escape(a['doctor'])}</td>"
            f"<td>{html.escape(a['specialty'])}</td>"
            f"<td>{html.escape(_format_date(a['date']))}</td>"
            f"<td>{html.escape(_format_time(a['time']))}</td>"
            f"<td>{html.escape(a['reason'] or '')}</td>"
            f"<td>{_status_badge(a['status'])}</td>"
            f"<td>{cancel_html}</td>"
            "</tr>"
        )
    return "".join(rows)


@router.get("/appointments", response_class=HTMLResponse)
def appointments_list(request: Request):
    store = _appointment_store(request)
    return f"""<!DOCTYPE html>
<html>
<head>{PAGE_STYLE}</head>
<body>
  {_nav_bar('appointments')}
  <div class="container">
    <h1>Appointments</h1>
    <table>
      <thead><tr><th>Doctor</th><th>Specialty</th><th>Date</th><th>Time</th><th>Reason</th><th>Status</th><th></th></tr></thead>
      <tbody>{_appointment_rows(store.all())}</tbody>
    </table>
  </div>
</body>
</html>"""


@router.get("/appointments/new", response_class=HTMLResponse)
def appointments_new(error: str = "", booked: int = 0):
    notice = '<div class="notice">Appointment booked!</div>' if booked else ""
    specialties = "".join(
        f'<option value="{html.escape(s)}">{html.escape(s)}</option>' for s in all_specialties()
    )
    return f"""<!DOCTYPE html>
<html>
<head>{PAGE_STYLE}</head>
<body>
  {_nav_bar('book')}
  <div class="container">
    <h1>Book an Appointment</h1>
    {_error_html(error)}
    {notice}
    <div class="card">
      <form method="post" action="/appointments">
        <div class="form-group">
          <label for="patient">Patient name</label>
          <input type="text" id="patient" name="patient" autocomplete="off">
        </div>
        <div class="form-group">
          <label for="specialty">Specialty <span style="color:#ef4444">*</span></label>
          <select id="specialty" name="specialty" required onchange="loadDoctors(this.value)">
            <option value="">Select a specialty...</option>
            {specialties}
          </select>
        </div>
        <div class="form-group">
          <label for="doctor">Doctor <span style="color:#ef4444">*</span></label>
          <select id="doctor" name="doctor" required>
            <option value="">Select a doctor...</option>
          </select>
        </div>
        <div class="form-group">
          <label for="date">Date <span style="color:#ef4444">*</span></label>
          <input type="date" id="date" name="date" required>
        </div>
        <div class="form-group">
          <label for="time">Time <span style="color:#ef4444">*</span></label>
          <input type="time" id="time" name="time" required>
        </div>
        <div class="form-group">
          <label for="reason">Reason</label>
          <textarea id="reason" name="reason" rows="3"></textarea>
        </div>
        <button class="btn-primary" type="submit">Book Appointment</button>
      </form>
    </div>
  </div>
  <script>
    async function loadDoctors(specialty) {{
      const sel = document.getElementById("doctor");
      sel.innerHTML = '<option value="">Select a doctor...</option>';
      if (!specialty) return;
      const resp = await fetch("/api/doctors?specialty=" + encodeURIComponent(specialty));
      const data = await resp.json();
      data.doctors.forEach(d => {{
        const opt = document.createElement("option");
        opt.value = d;
        opt.textContent = d;
        sel.appendChild(opt);
      }});
    }}
  </script>
</body>
</html>"""


@router.post("/appointments")
def appointments_create(
    request: Request,
    patient: str = Form(""),
    specialty: str = Form(""),
    doctor: str = Form(""),
    date: str = Form(""),
    time: str = Form(""),
    reason: str = Form(""),
):
    error, data = _validate_appointment_payload({
        "patient": patient, "specialty": specialty, "doctor": doctor,
        "date": date, "time": time, "reason": reason,
    })
    if error:
        return RedirectResponse(url="/appointments/new?error=" + quote_plus(error), status_code=303)
    store = _appointment_store(request)
    with store.lock:
        record = store.add(data)
        _persist_appointments(store)
    logger.info("Booked appointment %s with %s on %s", record["id"], record["doctor"], record["date"])
    return RedirectResponse(url="/appointments/new?booked=1", status_code=303)


@router.post("/appointments/{appt_id}/cancel")
def appointments_cancel(request: Request, appt_id: int):
    store = _appointment_store(request)
    with store.lock:
        record = store.cancel(appt_id)
        if record is not None:
            _persist_appointments(store)
    if record is None:
        logger.info("Cancel ignored: appointment %s not found", appt_id)
    return RedirectResponse(url="/appointments", status_code=303)


@router.get("/api/appointments")
def api_appointments(request: Request):
    return JSONResponse({"appointments": _appointment_store(request).all()})


@router.get("/api/appointments/upcoming")
def api_appointments_upcoming(request: Request, days: int = UPCOMING_WINDOW_DAYS):
    items = _appointment_store(request).upcoming(days, today=_today_local())
    return JSONResponse({"appointments": items})


@router.get("/api/appointments/summary")
def api_appointments_summary(request: Request):
    store = _appointment_store(request)
    return JSONResponse({
        "status_counts": appointment_status_summary(store),
        "next_appointment": next_appointment(store, today=_today_local()),
    })


@router.post("/api/appointments")
def api_appointments_create(request: Request, payload: dict = Body(...)):
    error, data = _validate_appointment_payload(payload)
    if error:
        return JSONResponse({"ok": False, "error": error}, status_code=400)
    store = _appointment_store(request)
    with store.lock:
        record = store.add(data)
        _persist_appointments(store)
    logger.info("Booked appointment %s with %s on %s", record["id"], record["doctor"], record["date"])
    return JSONResponse({"ok": True, "appointment": record})


@router.post("/api/appointments/{appt_id}/edit")
def api_appointments_edit(request: Request, appt_id: int, payload: dict = Body(...)):
    error, patch = _validate_appointment_payload(payload, partial=True)
    if error:
        return JSONResponse({"ok": False, "error": error}, status_code=400)
    store = _appointment_store(request)
    with store.lock:
        record = store.update(appt_id, patch)
        if record is not None:
            _persist_appointments(store)
    if record is None:
        logger.info("Edit ignored: appointment %s not found", appt_id)
        return JSONResponse({"ok": False, "error": "Appointment not found"}, status_code=404)
    return JSONResponse({"ok": True, "appointment": record})


@router.post("/api/appointments/{appt_id}/cancel")
def api_appointments_cancel(request: Request, appt_id: int):
    store = _appointment_store(request)
    with store.lock:
        record = store.cancel(appt_id)
        if record is not None:
            _persist_appointments(store)
    if record is None:
        logger.info("Cancel ignored: appointment %s not found", appt_id)
        return JSONResponse({"ok": False, "error": "Appointment not found"}, status_code=404)
    return JSONResponse({"ok": True, "appointment": record})


@router.get("/api/specialties")
def api_specialties():
    return JSONResponse({"specialties": all_specialties()})


@router.get("/api/doctors")
def api_doctors(specialty: str = ""):
    return JSONResponse({"specialty": specialty, "doctors": doctors_by_specialty(specialty)})
