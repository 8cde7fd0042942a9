from datetime import date, datetime, timezone

from admissions_scrape.db import postgres
from admissions_scrape.models import Program


class FakeCursor:

    def __init__(self):
        self.executed = []
        self.batches = []

    def execute(self, query, params=None):
        self.executed.append(query)

    def executemany(self, query, rows):
        self.batches.append((query, list(rows)))

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return None


class FakeConnection:

    def __init__(self):
        self.cur = FakeCursor()
        self.closed = False

    def cursor(self):
        return self.cur

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return None


def test_bulk_insert_rows_share_one_stamp(monkeypatch):
    conn = FakeConnection()
    monkeypatch.setattr(postgres, 'get_connection', lambda: conn)
    stamp = datetime(2025, 9, 1, 8, 30, tzinfo=timezone.utc)
    programs = [Program(title='Data Science', subject_areas=('AI', )), Program(application_code='LU-99')]
    assert postgres.bulk_insert_programs(programs, day=date(2025, 9, 1), created_at=stamp) == 2
    assert len(conn.cur.executed) == 1
    (_, rows), = conn.cur.batches
    assert [r['created_at'] for r in rows] == [stamp, stamp]
    assert rows[0]['subject_areas'] == ['AI']
    assert rows[1]['subject_areas'] == []
    assert conn.closed


def test_bulk_insert_chunks_large_batches(monkeypatch):
    conn = FakeConnection()
    monkeypatch.setattr(postgres, 'get_connection', lambda: conn)
    programs = [Program(title=f'P{i}') for i in range(postgres.CHUNK_SIZE + 1)]
    assert postgres.bulk_insert_programs(programs, day=date(2025, 9, 1)) == postgres.CHUNK_SIZE + 1
    assert [len(rows) for _, rows in conn.cur.batches] == [postgres.CHUNK_SIZE, 1]


def test_empty_batch_only_creates_table(monkeypatch):
    conn = FakeConnection()
    monkeypatch.setattr(postgres, 'get_connection', lambda: conn)
    assert postgres.bulk_insert_programs([], day=date(2025, 9, 1)) == 0
    assert len(conn.cur.executed) == 1
    assert conn.cur.batches == []
