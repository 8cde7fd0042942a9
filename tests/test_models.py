import dataclasses

import pytest

from admissions_scrape.models import Program, is_eligible, DB_COLUMNS


def test_to_db_row_columns():
    p = Program(title='Data Science', credit_count=120, subject_areas=('AI', 'Statistics'))
    row = p.to_db_row()
    assert tuple(row.keys()) == DB_COLUMNS
    assert row['subject_areas'] == ['AI', 'Statistics']
    assert row['credit_count'] == 120
    assert row['status'] is None


def test_empty_subject_areas_is_list():
    assert Program(title='X').to_db_row()['subject_areas'] == []


def test_program_is_immutable():
    p = Program(title='X')
    with pytest.raises(dataclasses.FrozenInstanceError):
        p.title = 'Y'  # type: ignore[misc]


@pytest.mark.parametrize('title, code, expected', [
    ('Data Science', None, True),
    (None, 'SU-12345', True),
    ('  ', None, False),
    (None, ' ', False),
    (None, None, False),
])
def test_is_eligible(title, code, expected):
    p = Program(title=title, application_code=code)
    assert is_eligible(p) is expected
    assert p.is_eligible() is expected
