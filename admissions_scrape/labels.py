from __future__ import annotations
"""Label -> value lookup inside one card.

Strategies (tried in order, first non-blank wins):
  1. definition list: <dt>Label</dt><dd>value</dd>
  2. inline text: <p>Label: value | Other: ...</p>

plus two helpers for fields that have no label:
  - pick_first_text: structural position via CSS selectors
  - scan_by_label_in_text: single regex over the flattened card text
"""
import re
from typing import Callable, Optional, Pattern, Sequence, Tuple, Union

from bs4 import Tag

from .markup import (
    DEFINITION_TERM_SELECTOR,
    DEFINITION_VALUE_TAG,
    INLINE_CANDIDATE_SELECTOR,
    INLINE_FIELD_TERMINATOR,
)


def _text(el: Tag) -> str:
    """Element text with whitespace runs collapsed (NBSP included)."""
    return " ".join(el.get_text(" ").split())


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _is_descendant(el: Tag, ancestor: Tag) -> bool:
    # bs4 Tag.__eq__ compares markup, identity is what matters here
    return any(p is ancestor for p in el.parents)


def _from_definition_list(card: Tag, label_pattern: str) -> Optional[str]:
    term_re = re.compile(rf"(?:{label_pattern})\s*:?", re.IGNORECASE)
    for dt in card.select(DEFINITION_TERM_SELECTOR):
        if not term_re.fullmatch(_text(dt)):
            continue
        dd = dt.find_next_sibling()
        if dd is None or dd.name != DEFINITION_VALUE_TAG:
            continue
        value = _text(dd)
        if value:
            return value
    return None


def _from_inline_text(card: Tag, label_pattern: str) -> Optional[str]:
    # label opens the element text or a '|' separated field
    # ("Application period: ..." is not "Period")
    sep = re.escape(INLINE_FIELD_TERMINATOR)
    line_re = re.compile(rf"(?:.*{sep})?\s*(?:{label_pattern}).*", re.IGNORECASE | re.DOTALL)
    prefix_re = re.compile(rf"^(?:.*?{sep})??\s*(?:{label_pattern})\s*:?", re.IGNORECASE | re.DOTALL)
    hits = []
    for el in [*card.select(INLINE_CANDIDATE_SELECTOR), card]:
        text = _text(el)
        if not line_re.fullmatch(text):
            continue
        rest = prefix_re.sub("", text, count=1)
        value = rest.split(INLINE_FIELD_TERMINATOR, 1)[0].strip()
        if value:
            hits.append((el, value))
    # innermost element wins: a wrapper div also contains the label
    for el, value in hits:
        if not any(other is not el and _is_descendant(other, el) for other, _ in hits):
            return value
    return None


Strategy = Callable[[Tag, str], Optional[str]]

LABEL_STRATEGIES: Tuple[Strategy, ...] = (
    _from_definition_list,
    _from_inline_text,
)


def get_by_label(card: Tag, label_pattern: str) -> Optional[str]:
    """Value next to a label matching `label_pattern` (case-insensitive regex)."""
    for strategy in LABEL_STRATEGIES:
        value = strategy(card, label_pattern)
        if not _blank(value):
            return value
    return None


def coalesce(*values: Optional[str]) -> Optional[str]:
    """First non-blank value, else None."""
    for v in values:
        if not _blank(v):
            return v
    return None


def pick_first_text(root: Tag, *selectors: str) -> Optional[str]:
    """Trimmed text of the first non-blank element, selectors tried in order."""
    for sel in selectors:
        for el in root.select(sel):
            t = _text(el)
            if t:
                return t
    return None


def card_text(card: Tag) -> str:
    """Flattened card text: one line per text node, whitespace collapsed."""
    lines = (" ".join(line.split()) for line in card.get_text("\n").splitlines())
    return "\n".join(line for line in lines if line)


def scan_by_label_in_text(
    full_text: Optional[str],
    label_value_regex: Union[str, Pattern[str]],
    group: int = 1,
) -> Optional[str]:
    """Capture group of the first match over the whole card text."""
    if not full_text:
        return None
    rx = label_value_regex if isinstance(label_value_regex, re.Pattern) else re.compile(label_value_regex, re.IGNORECASE)
    m = rx.search(full_text)
    if not m:
        return None
    value = m.group(group)
    if _blank(value):
        return None
    return value.strip()


def match_lines(texts: Sequence[str], rx: Pattern[str]) -> Optional[re.Match]:
    """First full match of `rx` among candidate texts."""
    for t in texts:
        m = rx.fullmatch(t)
        if m:
            return m
    return None


__all__ = [
    "LABEL_STRATEGIES",
    "get_by_label",
    "coalesce",
    "pick_first_text",
    "card_text",
    "scan_by_label_in_text",
    "match_lines",
]
