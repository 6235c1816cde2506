import html
import logging
from urllib.parse import quote_plus

from fastapi import APIRouter, Body, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from analysis import symptom_summary
from chatbot import get_health_advice
from config import SYMPTOM_CHOICES
from routers.records_utils import (
    _check_date, _check_time, _clean_str, _error_html, _persist_symptoms, _symptom_store,
)
from ui import PAGE_STYLE, _format_date, _nav_bar, _severity_color

router = APIRouter()
logger = logging.getLogger(__name__)

DURATION_CHOICES = ["Less than 1 hour", "1-2 hours", "2-4 hours", "4-8 hours",
                    "1 day", "1-2 days", "Several days", "Ongoing"]


def _validate_symptom_payload(payload: dict, partial: bool = False):
    """Return ``(error, data)`` with ``data`` holding only the canonical fields present."""
    data = {}
    if "symptom" in payload or not partial:
        label = _clean_str(payload.get("symptom"))
        if not label:
            return ("Symptom name is required", None)
        data["symptom"] = label
    if "severity" in payload or not partial:
        try:
            severity = int(payload.get("severity"))
        except (TypeError, ValueError):
            return ("Severity must be a whole number", None)
        if not (1 <= severity <= 10):
            return ("Severity must be between 1 and 10", None)
        data["severity"] = severity
    for key in ("duration", "notes"):
        if key in payload or not partial:
            data[key] = _clean_str(payload.get(key))
    date_str = _clean_str(payload.get("date"))
    if date_str:
        error = _check_date(date_str)
        if error:
            return (error, None)
        data["date"] = date_str
    time_str = _clean_str(payload.get("time"))
    if time_str:
        error = _check_time(time_str)
        if error:
            return (error, None)
        data["time"] = time_str
    return ("", data)


def _symptom_rows(items: list) -> str:
    if not items:
        return '<tr><td colspan="6" class="empty">No symptoms recorded yet.</td></tr>'
    rows = []
    for s in reversed(items):
        sev = int(s["severity"])
        rows.append(
            "<tr>"
            f"<td>{html.escape(_format_date(s['date']))} {html.escape(s['time'])}</td>"
            f"<td>{html.escape(s['symptom'])}</td>"
            f'<td><span class="badge" style="background:{_severity_color(sev)}">{sev}</span></td>'
            f"<td>{html.escape(s['duration'] or '')}</td>"
            f"<td>{html.escape(s['notes'] or '')}</td>"
            '<td><form method="post" action="/symptoms/delete" style="margin:0;"'
            ' onsubmit="return confirm(\'Delete this symptom log?\');">'
            f'<input type="hidden" name="id" value="{s["id"]}">'
            '<button class="btn-delete" type="submit">Delete</button></form></td>'
            "</tr>"
        )
    return "".join(rows)


@router.get("/symptoms", response_class=HTMLResponse)
def symptoms_list(request: Request, from_date: str = "", to_date: str = ""):
    store = _symptom_store(request)
    error = ""
    if from_date and to_date:
        error = _check_date(from_date) or _check_date(to_date)
    items = store.query_by_date_range(from_date, to_date) if from_date and to_date and not error else store.all()
    return f"""<!DOCTYPE html>
<html>
<head>{PAGE_STYLE}</head>
<body>
  {_nav_bar('symptoms')}
  <div class="container">
    <h1>Symptom History</h1>
    {_error_html(error)}
    <form method="get" action="/symptoms" style="display:flex; gap:8px; align-items:end; margin:12px 0;">
      <div><label for="from_date">From</label>
        <input type="date" id="from_date" name="from_date" value="{html.escape(from_date)}"></div>
      <div><label for="to_date">To</label>
        <input type="date" id="to_date" name="to_date" value="{html.escape(to_date)}"></div>
      <button class="btn-primary" type="submit">Filter</button>
    </form>
    <table>
      <thead><tr><th>When</th><th>Symptom</th><th>Severity</th><th>Duration</th><th>Notes</th><th></th></tr></thead>
      <tbody>{_symptom_rows(items)}</tbody>
    </table>
  </div>
</body>
</html>"""


@router.get("/symptoms/new", response_class=HTMLResponse)
def symptoms_new(error: str = "", advice: str = ""):
    advice_html = f'<div class="notice">{html.escape(advice)}</div>' if advice else ""
    options = "".join(f'<option value="{html.escape(c)}">{html.escape(c)}</option>' for c in SYMPTOM_CHOICES)
    durations = "".join(f'<option value="{html.escape(d)}">{html.escape(d)}</option>' for d in DURATION_CHOICES)
    return f"""<!DOCTYPE html>
<html>
<head>{PAGE_STYLE}</head>
<body>
  {_nav_bar('log')}
  <div class="container">
    <h1>Log a Symptom</h1>
    {_error_html(error)}
    {advice_html}
    <div class="card">
      <form method="post" action="/symptoms">
        <div class="form-group">
          <label for="symptom">Symptom <span style="color:#ef4444">*</span></label>
          <select id="symptom" name="symptom" required onchange="toggleCustom(this.value)">
            <option value="">Select a symptom...</option>
            {options}
            <option value="Other">Other</option>
          </select>
        </div>
        <div class="form-group" id="customSymptomGroup" style="display:none;">
          <label for="custom_symptom">Describe the symptom</label>
          <input type="text" id="custom_symptom" name="custom_symptom" autocomplete="off">
        </div>
        <div class="form-group">
          <label for="severity">Severity <span style="color:#ef4444">*</span></label>
          <div class="slider-row">
            <input type="range" id="severity" name="severity" min="1" max="10" value="5"
                   oninput="updateSeverity(this.value)">
            <div class="sev-badge" id="sev-badge" style="background:#eab308">5</div>
          </div>
        </div>
        <div class="form-group">
          <label for="duration">Duration</label>
          <select id="duration" name="duration">{durations}</select>
        </div>
        <div class="form-group">
          <label for="notes">Notes <span style="color:#aaa;font-weight:400">(optional)</span></label>
          <textarea id="notes" name="notes" rows="3" placeholder="Any additional details..."></textarea>
        </div>
        <button class="btn-primary" type="submit">Save Symptom</button>
      </form>
    </div>
  </div>
  <script>
    const colors = {{1:"#22c55e",2:"#22c55e",3:"#22c55e",
                     4:"#eab308",5:"#eab308",6:"#eab308",
                     7:"#f97316",8:"#f97316",
                     9:"#ef4444",10:"#ef4444"}};
    function updateSeverity(v) {{
      const badge = document.getElementById("sev-badge");
      badge.textContent = v;
      badge.style.background = colors[+v];
    }}
    function toggleCustom(v) {{
      const other = v === "Other";
      document.getElementById("customSymptomGroup").style.display = other ? "block" : "none";
      document.getElementById("custom_symptom").required = other;
    }}
  </script>
</body>
</html>"""


@router.post("/symptoms")
def symptoms_create(
    request: Request,
    symptom: str = Form(""),
    custom_symptom: str = Form(""),
    severity: str = Form(""),
    duration: str = Form(""),
    notes: str = Form(""),
):
    label = custom_symptom if symptom == "Other" else symptom
    error, data = _validate_symptom_payload(
        {"symptom": label, "severity": severity, "duration": duration, "notes": notes}
    )
    if error:
        return RedirectResponse(url="/symptoms/new?error=" + quote_plus(error), status_code=303)
    store = _symptom_store(request)
    with store.lock:
        record = store.add(data)
        _persist_symptoms(store)
    logger.info("Logged symptom %s (id=%s)", record["symptom"], record["id"])
    return RedirectResponse(url="/symptoms/new?advice=" + quote_plus(get_health_advice(record)), status_code=303)


@router.post("/symptoms/delete")
def symptoms_delete(request: Request, id: int = Form(...)):
    store = _symptom_store(request)
    with store.lock:
        removed = store.delete(id)
        if removed is not None:
            _persist_symptoms(store)
    if removed is None:
        logger.info("Delete ignored: symptom %s not found", id)
    return RedirectResponse(url="/symptoms", status_code=303)


@router.get("/api/symptoms")
def api_symptoms(request: Request, from_date: str = "", to_date: str = ""):
    store = _symptom_store(request)
    if from_date and to_date:
        error = _check_date(from_date) or _check_date(to_date)
        if error:
            return JSONResponse({"ok": False, "error": error}, status_code=400)
        return JSONResponse({"symptoms": store.query_by_date_range(from_date, to_date)})
    return JSONResponse({"symptoms": store.all()})


@router.get("/api/symptoms/summary")
def api_symptoms_summary(request: Request):
    return JSONResponse({"summary": symptom_summary(_symptom_store(request))})


@router.post("/api/symptoms")
def api_symptoms_create(request: Request, payload: dict = Body(...)):
    error, data = _validate_symptom_payload(payload)
    if error:
        return JSONResponse({"ok": False, "error": error}, status_code=400)
    store = _symptom_store(request)
    with store.lock:
        record = store.add(data)
        _persist_symptoms(store)
    logger.info("Logged symptom %s (id=%s)", record["symptom"], record["id"])
    return JSONResponse({"ok": True, "symptom": record, "advice": get_health_advice(record)})


@router.post("/api/symptoms/{sym_id}/edit")
def api_symptoms_edit(request: Request, sym_id: int, payload: dict = Body(...)):
    error, patch = _validate_symptom_payload(payload, partial=True)
    if error:
        return JSONResponse({"ok": False, "error": error}, status_code=400)
    store = _symptom_store(request)
    with store.lock:
        record = store.update(sym_id, patch)
        if record is not None:
            _persist_symptoms(store)
    if record is None:
        logger.info("Edit ignored: symptom %s not found", sym_id)
        return JSONResponse({"ok": False, "error": "Symptom not found"}, status_code=404)
    return JSONResponse({"ok": True, "symptom": record})


@router.post("/api/symptoms/{sym_id}/delete")
def api_symptoms_delete(request: Request, sym_id: int):
    store = _symptom_store(request)
    with store.lock:
        removed = store.delete(sym_id)
        if removed is not None:
            _persist_symptoms(store)
    if removed is None:
        logger.info("Delete ignored: symptom %s not found", sym_id)
        return JSONResponse({"ok": False, "error": "Symptom not found"}, status_code=404)
    return JSONResponse({"ok": True, "symptom": removed})
