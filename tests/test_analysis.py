import unittest
from datetime import date, datetime

from analysis import appointment_status_summary, dashboard_stats, next_appointment, symptom_summary
from store import AppointmentStore, SymptomStore

TODAY = date(2024, 6, 25)


def _clock():
    return datetime(2024, 6, 25, 12, 0)


class SymptomSummaryTests(unittest.TestCase):
    def test_groups_by_label(self):
        store = SymptomStore(clock=_clock)
        store.add({"symptom": "Headache", "severity": 6, "date": "2024-06-20"})
        store.add({"symptom": "Fever", "severity": 8, "date": "2024-06-21"})
        store.add({"symptom": "Headache", "severity": 8, "date": "2024-06-22"})
        summary = symptom_summary(store)
        self.assertEqual(summary["Headache"], {"count": 2, "average_severity": 7.0, "last_occurrence_date": "2024-06-22"})
        self.assertEqual(summary["Fever"]["count"], 1)

    def test_last_occurrence_follows_insertion_order(self):
        store = SymptomStore(clock=_clock)
        store.add({"symptom": "Headache", "severity": 6, "date": "2024-06-22"})
        store.add({"symptom": "Headache", "severity": 8, "date": "2024-06-10"})
        self.assertEqual(symptom_summary(store)["Headache"]["last_occurrence_date"], "2024-06-10")

    def test_average_rounds_to_one_decimal(self):
        store = SymptomStore(clock=_clock)
        for sev in (5, 6, 6):
            store.add({"symptom": "Cough", "severity": sev})
        self.assertEqual(symptom_summary(store)["Cough"]["average_severity"], 5.7)

    def test_average_rounds_half_up(self):
        store = SymptomStore(clock=_clock)
        for sev in (6, 6, 6, 7):
            store.add({"symptom": "Headache", "severity": sev})
        self.assertEqual(symptom_summary(store)["Headache"]["average_severity"], 6.3)

    def test_empty_store(self):
        self.assertEqual(symptom_summary(SymptomStore(clock=_clock)), {})


class AppointmentSummaryTests(unittest.TestCase):
    def setUp(self):
        self.store = AppointmentStore(clock=_clock)
        self.store.add({"doctor": "A", "specialty": "Cardiology", "date": "2024-06-28", "time": "10:00", "status": "Confirmed"})
        self.store.add({"doctor": "B", "specialty": "Neurology", "date": "2024-06-26", "time": "09:00"})
        self.store.add({"doctor": "C", "specialty": "Neurology", "date": "2024-06-25", "time": "16:00", "status": "Cancelled"})

    def test_status_counts(self):
        self.assertEqual(appointment_status_summary(self.store), {"Confirmed": 1, "Pending": 1, "Cancelled": 1})

    def test_next_appointment_within_one_day(self):
        self.assertEqual(next_appointment(self.store, today=TODAY)["doctor"], "B")

    def test_next_appointment_none_when_nothing_soon(self):
        self.assertIsNone(next_appointment(self.store, today=date(2024, 6, 29)))


class DashboardStatsTests(unittest.TestCase):
    def test_average_severity_rounds_half_up(self):
        symptoms = SymptomStore(clock=_clock)
        for sev in (6, 6, 6, 7):
            symptoms.add({"symptom": "Headache", "severity": sev, "date": "2024-06-20"})
        stats = dashboard_stats(symptoms, AppointmentStore(clock=_clock), today=TODAY)
        self.assertEqual(stats["average_severity"], 6.3)

    def test_empty_collections(self):
        stats = dashboard_stats(SymptomStore(clock=_clock), AppointmentStore(clock=_clock), today=TODAY)
        self.assertEqual(stats, {"total_symptoms": 0, "average_severity": 0,
                                 "upcoming_appointments": 0, "days_tracked": 0})

    def test_counts(self):
        symptoms = SymptomStore(clock=_clock)
        symptoms.add({"symptom": "Headache", "severity": 6, "date": "2024-06-20"})
        symptoms.add({"symptom": "Fever", "severity": 7, "date": "2024-06-20"})
        symptoms.add({"symptom": "Cough", "severity": 2, "date": "2024-06-21"})
        appointments = AppointmentStore(clock=_clock)
        appointments.add({"doctor": "A", "specialty": "Cardiology", "date": "2024-06-28", "time": "10:00"})
        appointments.add({"doctor": "B", "specialty": "Cardiology", "date": "2024-09-01", "time": "10:00"})
        stats = dashboard_stats(symptoms, appointments, today=TODAY)
        self.assertEqual(stats["total_symptoms"], 3)
        self.assertEqual(stats["average_severity"], 5.0)
        self.assertEqual(stats["upcoming_appointments"], 1)
        self.assertEqual(stats["days_tracked"], 2)


if __name__ == "__main__":
    unittest.main()
