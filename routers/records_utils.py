"""Shared helpers for the symptom, appointment and dashboard routers.

The stores live on ``app.state`` so every router sees the same instances.
"""
import html
from datetime import date, datetime

from fastapi import Request

from db import save_appointments, save_symptoms
from store import AppointmentStore, SymptomStore


def _symptom_store(request: Request) -> SymptomStore:
    return request.app.state.symptoms


def _appointment_store(request: Request) -> AppointmentStore:
    return request.app.state.appointments


def _persist_symptoms(store: SymptomStore):
    save_symptoms(store.all())


def _persist_appointments(store: AppointmentStore):
    save_appointments(store.all())


def _clean_str(value) -> str:
    return "" if value is None else str(value).strip()


def _check_date(value: str) -> str:
    """Return an error message, or '' when value is an ISO date."""
    try:
        date.fromisoformat(value)
    except ValueError:
        return "Invalid date format"
    return ""


def _check_time(value: str) -> str:
    try:
        datetime.strptime(value, "%H:%M")
    except ValueError:
        return "Invalid time format"
    return ""


def _error_html(error: str) -> str:
    return f'<div class="alert">{html.escape(error)}</div>' if error else ""
