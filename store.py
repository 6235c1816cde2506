"""In-memory symptom and appointment collections.

Each store owns its list of records and hands out copies. Lookups that miss
return ``None``; nothing in here validates field values, that happens at the
request boundary in the routers.
"""
import threading
from datetime import date, datetime, timedelta
from typing import Callable, Iterable, Optional

from config import UPCOMING_WINDOW_DAYS, _now_local

SYMPTOM_FIELDS = ("symptom", "severity", "duration", "notes", "date", "time")
APPOINTMENT_FIELDS = ("patient", "doctor", "specialty", "date", "time", "reason", "status")

STATUS_PENDING = "Pending"
STATUS_CONFIRMED = "Confirmed"
STATUS_CANCELLED = "Cancelled"
APPOINTMENT_STATUSES = (STATUS_PENDING, STATUS_CONFIRMED, STATUS_CANCELLED)


def generate_id(collection: Iterable[dict]) -> int:
    return max((item["id"] for item in collection), default=0) + 1


def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def _merge_patch(record: dict, patch: dict, fields: tuple) -> dict:
    for key in fields:
        if key in patch:
            record[key] = patch[key]
    return record


class _RecordStore:
    fields: tuple = ()

    def __init__(self, records: Optional[Iterable[dict]] = None,
                 clock: Callable[[], datetime] = _now_local):
        self._records: list[dict] = [dict(r) for r in (records or [])]
        self._clock = clock
        self.lock = threading.RLock()

    def __len__(self) -> int:
        return len(self._records)

    def _index_of(self, record_id: int) -> int:
        for i, r in enumerate(self._records):
            if r["id"] == record_id:
                return i
        return -1

    def all(self) -> list[dict]:
        with self.lock:
            return [dict(r) for r in self._records]

    def get(self, record_id: int) -> Optional[dict]:
        with self.lock:
            idx = self._index_of(record_id)
            return dict(self._records[idx]) if idx != -1 else None

    def update(self, record_id: int, patch: dict) -> Optional[dict]:
        with self.lock:
            idx = self._index_of(record_id)
            if idx == -1:
                return None
            return dict(_merge_patch(self._records[idx], patch, self.fields))

    def _append(self, record: dict) -> dict:
        self._records.append(record)
        return dict(record)


class SymptomStore(_RecordStore):
    fields = SYMPTOM_FIELDS

    def add(self, data: dict) -> dict:
        with self.lock:
            now = self._clock()
            record = {"id": generate_id(self._records), "duration": "", "notes": ""}
            _merge_patch(record, data, self.fields)
            if not record.get("date"):
                record["date"] = now.date().isoformat()
            if not record.get("time"):
                record["time"] = now.strftime("%H:%M")
            return self._append(record)

    def delete(self, record_id: int) -> Optional[dict]:
        with self.lock:
            idx = self._index_of(record_id)
            if idx == -1:
                return None
            return self._records.pop(idx)

    def query_by_date_range(self, start, end) -> list[dict]:
        start_d, end_d = _as_date(start), _as_date(end)
        with self.lock:
            return [dict(r) for r in self._records if start_d <= _as_date(r["date"]) <= end_d]


class AppointmentStore(_RecordStore):
    fields = APPOINTMENT_FIELDS

    def add(self, data: dict) -> dict:
        with self.lock:
            record = {"id": generate_id(self._records), "patient": "", "reason": ""}
            _merge_patch(record, data, self.fields)
            if not record.get("status"):
                record["status"] = STATUS_PENDING
            return self._append(record)

    def cancel(self, record_id: int) -> Optional[dict]:
        with self.lock:
            idx = self._index_of(record_id)
            if idx == -1:
                return None
            self._records[idx]["status"] = STATUS_CANCELLED
            return dict(self._records[idx])

    def upcoming(self, window_days: int = UPCOMING_WINDOW_DAYS,
                 today: Optional[date] = None) -> list[dict]:
        """Non-cancelled appointments dated within ``[today, today + window_days]``.

        ``today`` defaults to the store clock, read on every call. The result
        is sorted by date; appointments on the same day keep collection order.
        """
        start = _as_date(today) if today is not None else self._clock().date()
        end = start + timedelta(days=window_days)
        with self.lock:
            hits = [
                dict(r) for r in self._records
                if r.get("status") != STATUS_CANCELLED and start <= _as_date(r["date"]) <= end
            ]
        return sorted(hits, key=lambda r: _as_date(r["date"]))
