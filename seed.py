"""Seed script: resets the tracker to the demo records.

- Replaces every stored symptom and appointment with the demo set below.
- Leaves the profile row alone.
- ``init_db()`` also loads these records on the very first start.

Usage:
    python3 seed.py
"""

DEMO_SYMPTOMS = [
    {
        "id": 1,
        "symptom": "Headache",
        "severity": 6,
        "duration": "2-4 hours",
        "notes": "Throbbing pain in temples, worsens with light",
        "date": "2024-06-20",
        "time": "14:30",
    },
    {
        "id": 2,
        "symptom": "Fever",
        "severity": 8,
        "duration": "1-2 days",
        "notes": "Temperature 101.5°F, body aches",
        "date": "2024-06-22",
        "time": "08:15",
    },
]

DEMO_APPOINTMENTS = [
    {
        "id": 1,
        "patient": "",
        "doctor": "Dr. Sarah Johnson",
        "specialty": "Cardiology",
        "date": "2024-06-28",
        "time": "10:00",
        "reason": "Annual cardiac checkup",
        "status": "Confirmed",
    },
    {
        "id": 2,
        "patient": "",
        "doctor": "Dr. Michael Chen",
        "specialty": "General Medicine",
        "date": "2024-07-02",
        "time": "14:00",
        "reason": "Follow-up consultation",
        "status": "Pending",
    },
]


if __name__ == "__main__":
    import db

    db.init_db()
    db.save_symptoms(DEMO_SYMPTOMS)
    db.save_appointments(DEMO_APPOINTMENTS)
    print(f"Seeded {len(DEMO_SYMPTOMS)} symptoms and {len(DEMO_APPOINTMENTS)} appointments into {db.DB_PATH}.")
