from collections import defaultdict
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from config import NEXT_APPOINTMENT_WINDOW_DAYS, UPCOMING_WINDOW_DAYS
from store import AppointmentStore, SymptomStore


def _average(total, n: int) -> float:
    if not n:
        return 0
    # half-up, to match the one-decimal display
    return float((Decimal(total) / Decimal(n)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def symptom_summary(symptoms: SymptomStore) -> dict:
    """Per-label count, average severity and last occurrence.

    "Last occurrence" is the date of the most recently appended record for
    that label, not the latest date value.
    """
    groups: dict[str, dict] = {}
    for s in symptoms.all():
        g = groups.setdefault(s["symptom"], {"count": 0, "total": 0, "last": ""})
        g["count"] += 1
        g["total"] += int(s["severity"])
        g["last"] = s["date"]
    return {
        label: {
            "count": g["count"],
            "average_severity": _average(g["total"], g["count"]),
            "last_occurrence_date": g["last"],
        }
        for label, g in groups.items()
    }


def appointment_status_summary(appointments: AppointmentStore) -> dict:
    counts = defaultdict(int)
    for a in appointments.all():
        counts[a["status"]] += 1
    return dict(counts)


def next_appointment(appointments: AppointmentStore, today: Optional[date] = None) -> Optional[dict]:
    upcoming = appointments.upcoming(NEXT_APPOINTMENT_WINDOW_DAYS, today=today)
    return upcoming[0] if upcoming else None


def dashboard_stats(symptoms: SymptomStore, appointments: AppointmentStore,
                    today: Optional[date] = None) -> dict:
    rows = symptoms.all()
    return {
        "total_symptoms": len(rows),
        "average_severity": _average(sum(int(s["severity"]) for s in rows), len(rows)),
        "upcoming_appointments": len(appointments.upcoming(UPCOMING_WINDOW_DAYS, today=today)),
        "days_tracked": len({s["date"] for s in rows}),
    }
