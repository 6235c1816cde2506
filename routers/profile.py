import html
import re
from urllib.parse import quote_plus

from fastapi import APIRouter, Form
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse

from db import load_profile, save_profile
from routers.records_utils import _error_html
from ui import PAGE_STYLE, _nav_bar

router = APIRouter()

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _validate_profile(name: str, email: str):
    if len(name) > 120:
        return ("Name must be 120 characters or fewer", None, None)
    email_clean = email.strip().lower()
    if len(email_clean) > 254:
        return ("Email address is too long", None, None)
    if email_clean and not _EMAIL_RE.match(email_clean):
        return ("Invalid email address", None, None)
    return ("", name.strip() or "User", email_clean)


@router.get("/api/profile")
def api_profile_get():
    return JSONResponse(load_profile())


@router.post("/api/profile")
def api_profile_update(
    name: str = Form(""),
    email: str = Form(""),
    notifications: str = Form(""),
):
    error, name_clean, email_clean = _validate_profile(name, email)
    if error:
        return JSONResponse({"ok": False, "error": error}, status_code=400)
    save_profile(name_clean, email_clean, bool(notifications))
    return JSONResponse({"ok": True, "profile": load_profile()})


@router.get("/profile", response_class=HTMLResponse)
def profile_get(saved: int = 0, error: str = ""):
    p = load_profile()
    saved_html = '<div class="notice">Profile updated!</div>' if saved else ""
    checked = "checked" if p["notifications"] else ""
    return f"""<!DOCTYPE html>
<html>
<head>{PAGE_STYLE}</head>
<body>
  {_nav_bar('profile')}
  <div class="container">
    <h1>Profile</h1>
    {_error_html(error)}
    {saved_html}
    <div class="card">
      <form method="post" action="/profile">
        <div class="form-group">
          <label for="name">Name</label>
          <input type="text" id="name" name="name" value="{html.escape(p['name'])}">
        </div>
        <div class="form-group">
          <label for="email">Email</label>
          <input type="email" id="email" name="email" value="{html.escape(p['email'])}">
        </div>
        <div class="form-group">
          <label style="display:flex; gap:8px; align-items:center; font-weight:500;">
            <input type="checkbox" name="notifications" value="1" {checked}> Appointment reminders
          </label>
        </div>
        <button class="btn-primary" type="submit">Save Profile</button>
      </form>
    </div>
  </div>
</body>
</html>"""


@router.post("/profile")
def profile_post(
    name: str = Form(""),
    email: str = Form(""),
    notifications: str = Form(""),
):
    error, name_clean, email_clean = _validate_profile(name, email)
    if error:
        return RedirectResponse(url="/profile?error=" + quote_plus(error), status_code=303)
    save_profile(name_clean, email_clean, bool(notifications))
    return RedirectResponse(url="/profile?saved=1", status_code=303)
