"""Persistence for parsed programs: one table per scrape date.

The adapter is chosen by the DB_BACKEND environment variable
('postgres' by default, 'sqlite' for local runs and tests). It is resolved
on every call so tests can switch with monkeypatch.setenv.
"""
import os
from datetime import date as _date
from importlib import import_module
from typing import Optional


TABLE_PREFIX = "programs_"


def table_name_for(day: Optional[_date] = None) -> str:
    """programs_YYYY-MM-DD (needs quoting: contains '-')."""
    day = day or _date.today()
    return f"{TABLE_PREFIX}{day.isoformat()}"


def backend_name() -> str:
    return os.environ.get('DB_BACKEND', 'postgres').lower()


def _adapter():
    if backend_name() == 'sqlite':
        return import_module('admissions_scrape.db.sqlite')
    return import_module('admissions_scrape.db.postgres')


def get_connection(*args, **kwargs):
    return _adapter().get_connection(*args, **kwargs)


def init_table(*args, **kwargs):
    return _adapter().init_table(*args, **kwargs)


def bulk_insert_programs(*args, **kwargs):
    return _adapter().bulk_insert_programs(*args, **kwargs)


__all__ = [
    "TABLE_PREFIX",
    "table_name_for",
    "backend_name",
    "get_connection",
    "init_table",
    "bulk_insert_programs",
]
