import logging
import sqlite3
from contextlib import contextmanager

from config import DB_PATH, SEED_DEMO_DATA
from store import APPOINTMENT_FIELDS, SYMPTOM_FIELDS

logger = logging.getLogger(__name__)

DEFAULT_PROFILE = {"name": "User", "email": "", "notifications": True}


def init_db():
    with sqlite3.connect(DB_PATH) as conn:
        conn.execute("""
            CREATE TABLE IF NOT EXISTS app_meta (
                key   TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )
        """)
        # position keeps collection order independent of id reuse
        conn.execute("""
            CREATE TABLE IF NOT EXISTS symptoms (
                position INTEGER PRIMARY KEY,
                id       INTEGER NOT NULL,
                symptom  TEXT    NOT NULL,
                severity INTEGER NOT NULL,
                duration TEXT    NOT NULL DEFAULT '',
                notes    TEXT    NOT NULL DEFAULT '',
                date     TEXT    NOT NULL,
                time     TEXT    NOT NULL
            )
        """)
        conn.execute("""
            CREATE TABLE IF NOT EXISTS appointments (
                position  INTEGER PRIMARY KEY,
                id        INTEGER NOT NULL,
                patient   TEXT    NOT NULL DEFAULT '',
                doctor    TEXT    NOT NULL,
                specialty TEXT    NOT NULL,
                date      TEXT    NOT NULL,
                time      TEXT    NOT NULL,
                reason    TEXT    NOT NULL DEFAULT '',
                status    TEXT    NOT NULL DEFAULT 'Pending'
            )
        """)
        conn.execute("""
            CREATE TABLE IF NOT EXISTS user_profile (
                id            INTEGER PRIMARY KEY,
                name          TEXT    NOT NULL DEFAULT 'User',
                email         TEXT    NOT NULL DEFAULT '',
                notifications INTEGER NOT NULL DEFAULT 1
            )
        """)
        conn.execute("INSERT OR IGNORE INTO user_profile (id) VALUES (1)")
        seeded = conn.execute("SELECT value FROM app_meta WHERE key='demo_seeded'").fetchone()
        if not seeded:
            if SEED_DEMO_DATA:
                from seed import DEMO_APPOINTMENTS, DEMO_SYMPTOMS
                _replace_rows(conn, "symptoms", SYMPTOM_FIELDS, DEMO_SYMPTOMS)
                _replace_rows(conn, "appointments", APPOINTMENT_FIELDS, DEMO_APPOINTMENTS)
                logger.info("Loaded demo records into %s", DB_PATH)
            conn.execute("INSERT OR REPLACE INTO app_meta (key, value) VALUES ('demo_seeded', '1')")
        conn.commit()


@contextmanager
def get_db():
    conn = sqlite3.connect(DB_PATH)
    conn.row_factory = sqlite3.Row
    try:
        yield conn
    finally:
        conn.close()


def _replace_rows(conn, table: str, fields: tuple, records: list):
    cols = ("position", "id") + fields
    placeholders = ", ".join("?" for _ in cols)
    conn.execute(f"DELETE FROM {table}")
    conn.executemany(
        f"INSERT INTO {table} ({', '.join(cols)}) VALUES ({placeholders})",
        [(pos, r["id"]) + tuple(r.get(f, "") for f in fields) for pos, r in enumerate(records)],
    )


def _load_rows(table: str, fields: tuple) -> list[dict]:
    with get_db() as conn:
        rows = conn.execute(
            f"SELECT id, {', '.join(fields)} FROM {table} ORDER BY position"
        ).fetchall()
    return [dict(r) for r in rows]


def _save_rows(table: str, fields: tuple, records: list):
    with get_db() as conn:
        _replace_rows(conn, table, fields, records)
        conn.commit()
    logger.debug("Saved %d %s", len(records), table)


def load_symptoms() -> list[dict]:
    return _load_rows("symptoms", SYMPTOM_FIELDS)


def save_symptoms(records: list):
    _save_rows("symptoms", SYMPTOM_FIELDS, records)


def load_appointments() -> list[dict]:
    return _load_rows("appointments", APPOINTMENT_FIELDS)


def save_appointments(records: list):
    _save_rows("appointments", APPOINTMENT_FIELDS, records)


def load_profile() -> dict:
    with get_db() as conn:
        row = conn.execute("SELECT name, email, notifications FROM user_profile WHERE id = 1").fetchone()
    if row is None:
        return dict(DEFAULT_PROFILE)
    data = dict(row)
    data["notifications"] = bool(data["notifications"])
    return data


def save_profile(name: str, email: str, notifications: bool):
    with get_db() as conn:
        conn.execute(
            "INSERT OR REPLACE INTO user_profile (id, name, email, notifications) VALUES (1, ?, ?, ?)",
            (name, email, int(notifications)),
        )
        conn.commit()
