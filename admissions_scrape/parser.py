from __future__ import annotations
"""Search result page -> Program records.

Flow per page:
    locate_cards -> assemble (per card) -> is_eligible -> ParseResult

Each field resolves on its own through a fallback chain (structural lookup
first, flattened-text regex last). A field that cannot be resolved is None;
it never blocks the other fields or the other cards.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from bs4 import BeautifulSoup, Tag

from .coerce import extract_int, extract_money, normalize_whitespace, split_list
from .labels import card_text, coalesce, get_by_label, match_lines, pick_first_text, scan_by_label_in_text
from .locator import locate_cards, to_soup
from .logger import Logger, kv
from .models import Program, is_eligible
from . import markup as m


log = Logger.bind(__name__)


@dataclass(frozen=True)
class ParseResult:
    """Eligible programs in page order plus per-page counters."""
    programs: Tuple[Program, ...] = field(default_factory=tuple)
    located: int = 0
    ineligible: int = 0
    missing_tuition: int = 0

    def __len__(self) -> int:
        return len(self.programs)


def _label(card: Tag, *patterns: str) -> Optional[str]:
    return normalize_whitespace(coalesce(*(get_by_label(card, p) for p in patterns)))


def _header(card: Tag, text: str) -> Tuple[Optional[int], Optional[str], Optional[str]]:
    """credits, university, location from '120 Credits, X University, Location: Y'."""
    header_text = pick_first_text(card, *m.HEADER_SELECTORS)
    candidates = [header_text] if header_text else []
    candidates.extend(" ".join(el.get_text(" ").split()) for el in card.select(m.HEADER_FALLBACK_SELECTOR))
    hit = match_lines(candidates, m.HEADER_LINE_RE)
    if hit is None:
        hit = match_lines(text.splitlines(), m.HEADER_LINE_RE)
    if hit is None:
        return None, None, None
    return extract_int(hit.group(1)), normalize_whitespace(hit.group(2)), normalize_whitespace(hit.group(3))


def _money(card: Tag, text: str, label_pattern: str, text_re) -> Optional[int]:
    value = extract_money(get_by_label(card, label_pattern))
    if value is None:
        value = extract_money(scan_by_label_in_text(text, text_re))
    return value


def assemble(card: Tag) -> Program:
    """Build one Program from one card element."""
    text = card_text(card)

    title = normalize_whitespace(pick_first_text(card, *m.TITLE_SELECTORS))

    credit_count, university, location = _header(card, text)
    if credit_count is None:
        credit_count = extract_int(get_by_label(card, m.LABEL_CREDITS))
    if credit_count is None:
        credit_count = extract_int(scan_by_label_in_text(text, m.CREDITS_TEXT_RE))
    university = university or _label(card, m.LABEL_UNIVERSITY)
    location = location or _label(card, m.LABEL_LOCATION)

    level = _label(card, m.LABEL_LEVEL) or normalize_whitespace(scan_by_label_in_text(text, m.LEVEL_TEXT_RE))

    return Program(
        title=title,
        credit_count=credit_count,
        university=university,
        location=location,
        status=normalize_whitespace(pick_first_text(card, *m.STATUS_SELECTORS)),
        first_tuition_fee=_money(card, text, m.LABEL_FIRST_TUITION_FEE, m.FIRST_TUITION_FEE_TEXT_RE),
        total_tuition_fee=_money(card, text, m.LABEL_TOTAL_TUITION_FEE, m.TOTAL_TUITION_FEE_TEXT_RE),
        period=_label(card, m.LABEL_PERIOD),
        level=level,
        language_of_instruction=_label(card, m.LABEL_LANGUAGE),
        application_code=_label(card, m.LABEL_APPLICATION_CODE),
        teaching_form=_label(card, m.LABEL_TEACHING_FORM),
        pace_of_study=_label(card, m.LABEL_PACE),
        instructional_time=_label(card, m.LABEL_INSTRUCTIONAL_TIME),
        subject_areas=tuple(split_list(get_by_label(card, m.LABEL_SUBJECT_AREAS))),
    )


def _tuition_missing(program: Program) -> bool:
    return program.first_tuition_fee is None and program.total_tuition_fee is None


def parse_programs(html: Union[str, bytes, BeautifulSoup]) -> ParseResult:
    """Parse one search result page.

    Counters are local to this call:
        located         cards found by the locator
        ineligible      located cards dropped (no title, no application code)
        missing_tuition located cards with neither tuition fee resolved
    """
    soup = to_soup(html)
    cards = locate_cards(soup)
    programs: List[Program] = []
    ineligible = 0
    missing_tuition = 0
    for idx, card in enumerate(cards):
        try:
            program = assemble(card)
        except Exception as e:  # noqa: BLE001
            log.warn(f"card assemble fail index={idx} error={e}")
            program = Program()
        if _tuition_missing(program):
            missing_tuition += 1
            log.debug(f"tuition info missing index={idx} title={program.title}")
        if is_eligible(program):
            programs.append(program)
        else:
            ineligible += 1
    log.debug(f"parse_programs {kv(located=len(cards), records=len(programs), ineligible=ineligible, missing_tuition=missing_tuition)}")
    return ParseResult(
        programs=tuple(programs),
        located=len(cards),
        ineligible=ineligible,
        missing_tuition=missing_tuition,
    )


__all__ = ["ParseResult", "assemble", "parse_programs"]
