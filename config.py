import os
from contextvars import ContextVar
from datetime import date, datetime, timedelta, timezone
from typing import Optional

DB_PATH = os.environ.get("HEALTH_DB_PATH", "health.db")
SEED_DEMO_DATA = os.environ.get("HEALTH_SEED_DEMO", "1").strip().lower() not in {"0", "false", "no"}
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
HOST = os.environ.get("HOST", "127.0.0.1")
PORT = int(os.environ.get("PORT", "8000"))

UPCOMING_WINDOW_DAYS = 30
NEXT_APPOINTMENT_WINDOW_DAYS = 1
TZ_OFFSET_COOKIE = "tz_offset"

SYMPTOM_CHOICES = [
    "Headache", "Fever", "Cough", "Fatigue", "Nausea",
    "Dizziness", "Back pain", "Chest pain", "Sore throat", "Stomach ache",
]

_client_now: ContextVar[Optional[datetime]] = ContextVar("_client_now", default=None)


def _set_client_clock(tz_offset_cookie: str):
    """Set per-request client-local clock derived from JS timezone offset cookie."""
    offset = None
    try:
        offset = int((tz_offset_cookie or "").strip())
    except ValueError:
        offset = None
    if offset is not None and -840 <= offset <= 840:
        now_utc = datetime.now(timezone.utc).replace(tzinfo=None)
        _client_now.set(now_utc - timedelta(minutes=offset))
        return
    _client_now.set(datetime.now())


def _now_local() -> datetime:
    return _client_now.get() or datetime.now()


def _today_local() -> date:
    return _now_local().date()
