from __future__ import annotations
from dataclasses import dataclass, asdict, field
from typing import Optional, Any, Dict, Tuple


@dataclass(frozen=True)
class Program:
    """One study programme card from the search result page. DB row source.

    first_tuition_fee / total_tuition_fee: whole currency units (SEK on the
    source site), separators stripped. Unknown is None.
    subject_areas: trimmed, non-blank, in page order. Never None.
    """
    title: Optional[str] = None
    credit_count: Optional[int] = None
    university: Optional[str] = None
    location: Optional[str] = None
    status: Optional[str] = None  # e.g. "Application period not open"
    first_tuition_fee: Optional[int] = None
    total_tuition_fee: Optional[int] = None
    period: Optional[str] = None
    level: Optional[str] = None
    language_of_instruction: Optional[str] = None
    application_code: Optional[str] = None
    teaching_form: Optional[str] = None
    pace_of_study: Optional[str] = None
    instructional_time: Optional[str] = None
    subject_areas: Tuple[str, ...] = field(default_factory=tuple)

    def is_eligible(self) -> bool:
        return is_eligible(self)

    def to_db_row(self) -> Dict[str, Any]:
        d = asdict(self)
        d["subject_areas"] = list(self.subject_areas)
        return d


def _present(value: Optional[str]) -> bool:
    return value is not None and bool(value.strip())


def is_eligible(program: Program) -> bool:
    """A record needs a title or an application code to be stored."""
    return _present(program.title) or _present(program.application_code)


DB_COLUMNS: Tuple[str, ...] = (
    "title",
    "credit_count",
    "university",
    "location",
    "status",
    "first_tuition_fee",
    "total_tuition_fee",
    "period",
    "level",
    "language_of_instruction",
    "application_code",
    "teaching_form",
    "pace_of_study",
    "instructional_time",
    "subject_areas",
)
