import unittest
from datetime import date, datetime

from store import (
    STATUS_CANCELLED, STATUS_CONFIRMED, STATUS_PENDING,
    AppointmentStore, SymptomStore, generate_id,
)

FIXED_NOW = datetime(2024, 6, 25, 9, 30)


def _clock():
    return FIXED_NOW


def _symptom(**overrides):
    data = {"symptom": "Headache", "severity": 6, "duration": "2-4 hours", "notes": "", "date": "2024-06-20", "time": "14:30"}
    data.update(overrides)
    return data


def _appointment(**overrides):
    data = {"doctor": "Dr. Sarah Johnson", "specialty": "Cardiology", "date": "2024-06-28",
            "time": "10:00", "reason": "Checkup"}
    data.update(overrides)
    return data


class GenerateIdTests(unittest.TestCase):
    def test_empty_collection_starts_at_one(self):
        self.assertEqual(generate_id([]), 1)

    def test_next_id_is_max_plus_one(self):
        self.assertEqual(generate_id([{"id": 3}, {"id": 7}, {"id": 2}]), 8)

    def test_deleting_highest_id_allows_reuse(self):
        store = SymptomStore(clock=_clock)
        store.add(_symptom())
        second = store.add(_symptom())
        store.delete(second["id"])
        self.assertEqual(store.add(_symptom())["id"], second["id"])


class SymptomStoreTests(unittest.TestCase):
    def setUp(self):
        self.store = SymptomStore(clock=_clock)

    def test_add_assigns_unique_ids(self):
        ids = [self.store.add(_symptom())["id"] for _ in range(5)]
        self.assertEqual(ids, [1, 2, 3, 4, 5])
        self.assertEqual(len(self.store), 5)

    def test_add_defaults_date_and_time_from_clock(self):
        record = self.store.add({"symptom": "Cough", "severity": 3, "duration": "1 day"})
        self.assertEqual(record["date"], "2024-06-25")
        self.assertEqual(record["time"], "09:30")
        self.assertEqual(record["notes"], "")

    def test_add_keeps_supplied_date_and_time(self):
        record = self.store.add(_symptom(date="2024-01-02", time="07:05"))
        self.assertEqual((record["date"], record["time"]), ("2024-01-02", "07:05"))

    def test_add_does_not_clamp_severity(self):
        self.assertEqual(self.store.add(_symptom(severity=42))["severity"], 42)

    def test_returned_record_is_a_copy(self):
        record = self.store.add(_symptom())
        record["symptom"] = "Changed"
        self.assertEqual(self.store.get(record["id"])["symptom"], "Headache")

    def test_update_changes_only_patched_fields(self):
        before = self.store.add(_symptom(notes="first"))
        after = self.store.update(before["id"], {"severity": 9})
        self.assertEqual(after["severity"], 9)
        for key in ("id", "symptom", "duration", "notes", "date", "time"):
            self.assertEqual(after[key], before[key])

    def test_update_ignores_id_and_unknown_keys(self):
        record = self.store.add(_symptom())
        after = self.store.update(record["id"], {"id": 99, "colour": "red"})
        self.assertEqual(after["id"], record["id"])
        self.assertNotIn("colour", after)

    def test_missing_id_returns_none_and_leaves_collection_alone(self):
        self.store.add(_symptom())
        snapshot = self.store.all()
        self.assertIsNone(self.store.update(42, {"severity": 1}))
        self.assertIsNone(self.store.delete(42))
        self.assertEqual(self.store.all(), snapshot)

    def test_delete_returns_removed_record(self):
        first = self.store.add(_symptom())
        self.store.add(_symptom(symptom="Fever"))
        removed = self.store.delete(first["id"])
        self.assertEqual(removed["id"], first["id"])
        self.assertEqual([s["symptom"] for s in self.store.all()], ["Fever"])

    def test_query_by_date_range_is_inclusive_and_keeps_order(self):
        self.store.add(_symptom(date="2024-06-22"))
        self.store.add(_symptom(date="2024-06-18"))
        self.store.add(_symptom(date="2024-06-20"))
        self.store.add(_symptom(date="2024-06-25"))
        hits = self.store.query_by_date_range("2024-06-18", date(2024, 6, 22))
        self.assertEqual([h["date"] for h in hits], ["2024-06-22", "2024-06-18", "2024-06-20"])

    def test_query_by_date_range_without_matches(self):
        self.store.add(_symptom(date="2024-06-22"))
        self.assertEqual(self.store.query_by_date_range("2023-01-01", "2023-01-31"), [])


class AppointmentStoreTests(unittest.TestCase):
    def setUp(self):
        self.store = AppointmentStore(clock=_clock)

    def test_add_defaults_status_to_pending(self):
        self.assertEqual(self.store.add(_appointment())["status"], STATUS_PENDING)

    def test_add_keeps_supplied_status(self):
        self.assertEqual(self.store.add(_appointment(status=STATUS_CONFIRMED))["status"], STATUS_CONFIRMED)

    def test_update_merges_patch(self):
        record = self.store.add(_appointment())
        after = self.store.update(record["id"], {"time": "11:15", "status": STATUS_CONFIRMED})
        self.assertEqual((after["time"], after["status"]), ("11:15", STATUS_CONFIRMED))
        self.assertEqual(after["doctor"], record["doctor"])

    def test_cancel_is_idempotent(self):
        record = self.store.add(_appointment(status=STATUS_CONFIRMED))
        first = self.store.cancel(record["id"])
        second = self.store.cancel(record["id"])
        self.assertEqual(first["status"], STATUS_CANCELLED)
        self.assertEqual(first, second)
        self.assertEqual({k: v for k, v in first.items() if k != "status"},
                         {k: v for k, v in record.items() if k != "status"})

    def test_update_missing_id_returns_none(self):
        self.store.add(_appointment())
        snapshot = self.store.all()
        self.assertIsNone(self.store.update(7, {"status": STATUS_CONFIRMED}))
        self.assertEqual(self.store.all(), snapshot)

    def test_cancel_missing_id_returns_none(self):
        self.store.add(_appointment())
        snapshot = self.store.all()
        self.assertIsNone(self.store.cancel(7))
        self.assertEqual(self.store.all(), snapshot)

    def test_upcoming_sorts_and_skips_cancelled(self):
        self.store.add(_appointment(date="2024-07-02", status=STATUS_PENDING))
        self.store.add(_appointment(date="2024-06-28", status=STATUS_CONFIRMED))
        self.store.add(_appointment(date="2024-06-26", status=STATUS_CANCELLED))
        hits = self.store.upcoming(30, today=date(2024, 6, 25))
        self.assertEqual([h["date"] for h in hits], ["2024-06-28", "2024-07-02"])

    def test_upcoming_window_bounds_are_inclusive(self):
        self.store.add(_appointment(date="2024-06-24"))
        self.store.add(_appointment(date="2024-06-25"))
        self.store.add(_appointment(date="2024-06-26"))
        self.store.add(_appointment(date="2024-06-27"))
        hits = self.store.upcoming(1, today=date(2024, 6, 25))
        self.assertEqual([h["date"] for h in hits], ["2024-06-25", "2024-06-26"])

    def test_upcoming_reads_clock_when_today_omitted(self):
        self.store.add(_appointment(date="2024-06-28"))
        self.assertEqual(len(self.store.upcoming()), 1)
        later = AppointmentStore(self.store.all(), clock=lambda: datetime(2024, 8, 1))
        self.assertEqual(later.upcoming(), [])


if __name__ == "__main__":
    unittest.main()
