from __future__ import annotations
"""SQLite adapter (local runs / tests). subject_areas is stored as a JSON array."""
import json
import os
import sqlite3
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Iterable, Optional

from admissions_scrape.logger import Logger
from admissions_scrape.models import DB_COLUMNS, Program
from admissions_scrape.db import table_name_for


log = Logger.bind(__name__)

DB_FILENAME = "database.db"

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS "{table}" (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT,
    credit_count INTEGER,
    university TEXT,
    location TEXT,
    status TEXT,
    first_tuition_fee INTEGER,
    total_tuition_fee INTEGER,
    period TEXT,
    level TEXT,
    language_of_instruction TEXT,
    application_code TEXT,
    teaching_form TEXT,
    pace_of_study TEXT,
    instructional_time TEXT,
    subject_areas TEXT NOT NULL DEFAULT '[]',
    created_at TEXT NOT NULL
);
"""


def get_connection(db_path: Optional[Path] = None) -> sqlite3.Connection:
    """New connection; path from argument, then SQLITE_PATH, then database.db."""
    path = Path(db_path or os.environ.get('SQLITE_PATH') or DB_FILENAME)
    conn = sqlite3.connect(path, timeout=30.0)
    try:
        conn.execute("PRAGMA journal_mode=WAL;")
    except sqlite3.DatabaseError as e:
        log.debug(f"pragma setup fail error={e}")
    return conn


def init_table(day: Optional[date] = None, db_path: Optional[Path] = None) -> str:
    table = table_name_for(day)
    conn = get_connection(db_path)
    try:
        with conn:
            conn.executescript(SCHEMA_SQL.format(table=table))
        log.debug(f"table ready table={table}")
        return table
    finally:
        conn.close()


def bulk_insert_programs(programs: Iterable[Program], day: Optional[date] = None, created_at: Optional[datetime] = None, db_path: Optional[Path] = None) -> int:
    """Insert all programs into the day's table in one transaction."""
    table = table_name_for(day)
    stamp = (created_at or datetime.now(timezone.utc)).isoformat()
    columns = (*DB_COLUMNS, "created_at")
    placeholders = ",".join(f":{c}" for c in columns)
    count = 0
    conn = get_connection(db_path)
    try:
        with conn:
            conn.executescript(SCHEMA_SQL.format(table=table))
            for p in programs:
                row = p.to_db_row()
                row["subject_areas"] = json.dumps(row["subject_areas"], ensure_ascii=False)
                row["created_at"] = stamp
                conn.execute(
                    f'INSERT INTO "{table}" ({",".join(columns)}) VALUES ({placeholders});',
                    row,
                )
                count += 1
        if count == 0:
            log.info(f"no programs parsed, created empty table table={table}")
        log.debug(f"insert done table={table} rows={count}")
        return count
    finally:
        conn.close()
