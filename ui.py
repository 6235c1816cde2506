import html
from datetime import date, datetime

from db import load_profile


def _severity_color(s):
    if s <= 3: return "#22c55e"   # green
    if s <= 6: return "#eab308"   # yellow
    if s <= 8: return "#f97316"   # orange
    return "#ef4444"              # red


_STATUS_COLORS = {
    "Pending":   ("#fef9c3", "#92400e"),
    "Confirmed": ("#dcfce7", "#15803d"),
    "Cancelled": ("#fee2e2", "#b91c1c"),
}


def _status_badge(status: str) -> str:
    bg, fg = _STATUS_COLORS.get(status, ("#f3f4f6", "#374151"))
    return (
        f'<span style="font-size:12px;background:{bg};color:{fg};border-radius:10px;'
        f'padding:2px 8px;font-weight:700;">{html.escape(status)}</span>'
    )


def _format_date(date_str: str) -> str:
    """'2024-06-20' -> 'June 20, 2024'."""
    try:
        d = date.fromisoformat(str(date_str)[:10])
    except ValueError:
        return date_str
    return f"{d.strftime('%B')} {d.day}, {d.year}"


def _format_time(time_str: str) -> str:
    """'14:30' -> '2:30 PM'."""
    try:
        t = datetime.strptime(time_str, "%H:%M")
    except (TypeError, ValueError):
        return time_str
    hour = t.hour % 12 or 12
    return f"{hour}:{t.minute:02d} {'PM' if t.hour >= 12 else 'AM'}"


def _nav_bar(active: str = "") -> str:
    user_name = html.escape(load_profile().get("name") or "User")

    def lnk(href, label, key):
        if active == key:
            s = "color:#fff; font-weight:600; border-bottom:2px solid rgba(255,255,255,0.8); padding-bottom:2px;"
        else:
            s = "color:rgba(255,255,255,0.7); font-weight:500;"
        return f'<a href="{href}" style="text-decoration:none; font-size:14px; {s}">{label}</a>'
    return (
        '<nav style="background:#1e3a8a;">'
        '<div style="padding:0 24px; min-height:52px; display:flex; align-items:center; gap:20px; flex-wrap:wrap;">'
        '<span style="font-weight:800; color:#fff; font-size:15px; flex-shrink:0; margin-right:8px;">'
        'Health Tracker</span>'
        '<div class="nav-links">'
        + lnk("/", "Home", "home")
        + lnk("/symptoms/new", "Log Symptom", "log")
        + lnk("/symptoms", "Symptoms", "symptoms")
        + lnk("/chat", "Ask MediBot", "chat")
        + lnk("/appointments/new", "Book Appointment", "book")
        + lnk("/appointments", "Appointments", "appointments")
        + lnk("/profile", "Profile", "profile")
        + '</div>'
        f'<span style="color:rgba(255,255,255,0.85); font-size:13px;">Hi, <strong>{user_name}</strong></span>'
        '</div>'
        '</nav>'
    )


PAGE_STYLE = """
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <script>
    (function () {
      document.cookie = "tz_offset=" + String(new Date().getTimezoneOffset()) +
        "; path=/; max-age=31536000; SameSite=Lax";
    })();
  </script>
  <style>
    body { font-family: system-ui, sans-serif; background: #f5f5f5; margin: 0; padding: 0; color: #222; }
    .container { max-width: 860px; margin: 0 auto; padding: 24px; }
    h1 { margin-bottom: 4px; }
    .card { background: #fff; border: 1px solid #e0e0e0; border-radius: 8px; padding: 16px; margin: 12px 0; }
    .stats { display: grid; grid-template-columns: repeat(auto-fit, minmax(160px, 1fr)); gap: 12px; }
    .stat { background: #fff; border: 1px solid #e0e0e0; border-radius: 8px; padding: 14px; text-align: center; }
    .stat-value { font-size: 28px; font-weight: 800; color: #1e3a8a; }
    .stat-label { font-size: 12px; color: #888; text-transform: uppercase; letter-spacing: .06em; }
    table { width: 100%; border-collapse: collapse; background: #fff; font-size: 14px; }
    th, td { text-align: left; padding: 8px 10px; border-bottom: 1px solid #f0f0f0; vertical-align: top; }
    th { font-size: 12px; color: #6b7280; text-transform: uppercase; letter-spacing: .05em; }
    .badge { display: inline-flex; width: 30px; height: 30px; border-radius: 50%;
             color: #fff; font-weight: 700; font-size: 13px;
             align-items: center; justify-content: center; }
    .btn-delete { background: none; border: 1px solid #e0e0e0;
                  border-radius: 6px; padding: 4px 10px; font-size: 13px; color: #888;
                  cursor: pointer; }
    .btn-delete:hover { background: #fee2e2; border-color: #ef4444; color: #ef4444; }
    .btn-primary { background: #3b82f6; color: #fff; border: none; border-radius: 8px;
                   padding: 10px 22px; font-size: 15px; cursor: pointer; font-weight: 600; }
    .btn-primary:hover { background: #2563eb; }
    .form-group { margin-bottom: 20px; }
    label { display: block; font-weight: 600; font-size: 14px; margin-bottom: 6px; }
    input[type=text], input[type=email], input[type=date], input[type=time], select, textarea {
      width: 100%; box-sizing: border-box; border: 1px solid #d1d5db;
      border-radius: 6px; padding: 8px 10px; font-size: 15px; font-family: inherit; }
    .slider-row { display: flex; align-items: center; gap: 14px; }
    input[type=range] { flex: 1; accent-color: #3b82f6; height: 6px; cursor: pointer; }
    .sev-badge { width: 42px; height: 42px; border-radius: 50%; color: #fff; font-weight: 700;
                 font-size: 18px; display: flex; align-items: center; justify-content: center;
                 flex-shrink: 0; transition: background 0.2s; }
    .alert { background: #fee2e2; border: 1px solid #fca5a5; color: #b91c1c;
             border-radius: 6px; padding: 10px 14px; margin-bottom: 16px; font-size: 14px; }
    .notice { background: #eff6ff; border: 1px solid #bfdbfe; color: #1e40af;
              border-radius: 6px; padding: 10px 14px; margin-bottom: 16px; font-size: 14px; }
    .empty { color: #888; font-style: italic; margin-top: 16px; }
    .nav-links { flex: 1; display: flex; gap: 18px; flex-wrap: wrap; }
    .chat-box { height: 360px; overflow-y: auto; background: #fff; border: 1px solid #e0e0e0;
                border-radius: 8px; padding: 12px; }
    .message { margin: 8px 0; }
    .message.user { text-align: right; }
    .message-content { display: inline-block; padding: 8px 12px; border-radius: 10px; max-width: 80%;
                       font-size: 14px; text-align: left; }
    .message.bot .message-content { background: #eff6ff; }
    .message.user .message-content { background: #dcfce7; }
    @media (max-width: 640px) { .container { padding: 16px; } }
  </style>
"""
