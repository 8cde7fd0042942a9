from __future__ import annotations
"""Typed coercion helpers for free text scraped from listing cards.

Every helper returns None (or [] for lists) instead of raising: a value
that cannot be coerced is treated exactly like a field that was not found.

Money amounts are whole currency units. All non-digit characters are
stripped, so thousands and decimal separators are indistinguishable:
'145 000 SEK' -> 145000, '12.50' -> 1250.
"""
import re
from typing import List, Optional


# INT column upper bound on the persistence side
INT_MAX = 2_147_483_647

_re_whitespace = re.compile(r"\s+")
_re_int_run = re.compile(r"\d{1,5}")
_re_money_run = re.compile(r"\d[\d\s.,'\u00a0\u202f]*")
_re_non_digit = re.compile(r"[^0-9]")
_re_list_sep = re.compile(r"[•,|/；;]")

_NBSP_CHARS = ("\u00a0", "\u202f", "\u2007")


def normalize_whitespace(text: Optional[str]) -> Optional[str]:
    """NBSP -> space, trim. Blank result -> None."""
    if text is None:
        return None
    t = text
    for ch in _NBSP_CHARS:
        t = t.replace(ch, " ")
    t = t.strip()
    return t or None


def extract_int(text: Optional[str]) -> Optional[int]:
    """First run of 1-5 digits after all whitespace is removed.

    'credits: 120' -> 120, '7,5 hp' -> 7, 'none' -> None
    """
    if not text:
        return None
    m = _re_int_run.search(_re_whitespace.sub("", text))
    if not m:
        return None
    return int(m.group(0))


def extract_money(text: Optional[str]) -> Optional[int]:
    """First numeric-looking run with its punctuation stripped to digits.

    'Total: 145 000 SEK' -> 145000. Values outside the INT range are
    rejected (None).
    """
    if not text:
        return None
    m = _re_money_run.search(text)
    if not m:
        return None
    digits = _re_non_digit.sub("", m.group(0))
    if not digits:
        return None
    value = int(digits)
    if value > INT_MAX:
        return None
    return value


def split_list(text: Optional[str]) -> List[str]:
    """Split on • , | / ； ; and drop blank parts, keeping order and duplicates."""
    if not text or not text.strip():
        return []
    parts = (normalize_whitespace(p) for p in _re_list_sep.split(text))
    return [p for p in parts if p]


__all__ = ["normalize_whitespace", "extract_int", "extract_money", "split_list", "INT_MAX"]
