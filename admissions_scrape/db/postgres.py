"""PostgreSQL adapter (default backend).

Connection parameters come from DATABASE_URL, or from the libpq style
PG* variables with defaults matching the local `se_edu` database.
subject_areas is stored as TEXT[].
"""
from __future__ import annotations
import os
from datetime import date, datetime, timezone
from typing import Iterable, Optional

import psycopg2
from psycopg2 import sql

from admissions_scrape.logger import Logger
from admissions_scrape.models import DB_COLUMNS, Program
from admissions_scrape.db import table_name_for


log = Logger.bind(__name__)

CHUNK_SIZE = 500

DB_HOST = os.environ.get('PGHOST', 'localhost')
DB_PORT = int(os.environ.get('PGPORT', '5432'))
DB_USER = os.environ.get('PGUSER') or None
DB_PASSWORD = os.environ.get('PGPASSWORD') or None
DB_NAME = os.environ.get('PGDATABASE', 'se_edu')

SCHEMA_SQL_PG = """
CREATE TABLE IF NOT EXISTS {table} (
    id SERIAL PRIMARY KEY,
    title TEXT,
    credit_count INT,
    university TEXT,
    location TEXT,
    status TEXT,
    first_tuition_fee INT,
    total_tuition_fee INT,
    period TEXT,
    level TEXT,
    language_of_instruction TEXT,
    application_code TEXT,
    teaching_form TEXT,
    pace_of_study TEXT,
    instructional_time TEXT,
    subject_areas TEXT[] NOT NULL DEFAULT '{{}}',
    created_at TIMESTAMPTZ NOT NULL
);
"""


def get_connection():
    dsn = os.environ.get('DATABASE_URL')
    if dsn:
        return psycopg2.connect(dsn)
    return psycopg2.connect(
        host=DB_HOST,
        port=DB_PORT,
        user=DB_USER,
        password=DB_PASSWORD,
        dbname=DB_NAME,
    )


def _create(cur, table: str) -> None:
    cur.execute(sql.SQL(SCHEMA_SQL_PG).format(table=sql.Identifier(table)))


def init_table(day: Optional[date] = None) -> str:
    table = table_name_for(day)
    conn = get_connection()
    try:
        with conn:
            with conn.cursor() as cur:
                _create(cur, table)
        log.debug(f"table ready table={table}")
        return table
    finally:
        conn.close()


def bulk_insert_programs(programs: Iterable[Program], day: Optional[date] = None, created_at: Optional[datetime] = None) -> int:
    """Insert all programs into the day's table in one transaction."""
    table = table_name_for(day)
    stamp = created_at or datetime.now(timezone.utc)
    columns = (*DB_COLUMNS, "created_at")
    rows = []
    for p in programs:
        row = p.to_db_row()
        row["created_at"] = stamp
        rows.append(row)
    if not rows:
        log.info(f"no programs parsed, creating empty table table={table}")
    conn = get_connection()
    try:
        with conn:
            with conn.cursor() as cur:
                _create(cur, table)
                insert_sql = sql.SQL("INSERT INTO {table} ({cols}) VALUES ({vals})").format(
                    table=sql.Identifier(table),
                    cols=sql.SQL(", ").join(sql.Identifier(c) for c in columns),
                    vals=sql.SQL(", ").join(sql.Placeholder(c) for c in columns),
                )
                for i in range(0, len(rows), CHUNK_SIZE):
                    cur.executemany(insert_sql, rows[i:i + CHUNK_SIZE])
        log.debug(f"insert done table={table} rows={len(rows)}")
        return len(rows)
    finally:
        conn.close()
