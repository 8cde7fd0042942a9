from __future__ import annotations
"""Card Locator: which elements of the page are programme cards.

Two phases, one card set per document:
  1. exact marker (CARD_SELECTOR)
  2. only when 1 is empty: broad containers whose text looks like a listing
"""
from typing import List

from bs4 import BeautifulSoup, Tag

from .logger import Logger
from .markup import CARD_SELECTOR, FALLBACK_CONTAINER_SELECTOR, LISTING_TEXT_RE


log = Logger.bind(__name__)


def _primary(soup: Tag) -> List[Tag]:
    return list(soup.select(CARD_SELECTOR))


def _fallback(soup: Tag) -> List[Tag]:
    cards: List[Tag] = []
    seen = set()
    for el in soup.select(FALLBACK_CONTAINER_SELECTOR):
        if id(el) in seen:
            continue
        if not LISTING_TEXT_RE.search(el.get_text(" ")):
            continue
        seen.add(id(el))
        cards.append(el)
    return cards


def locate_cards(soup: Tag) -> List[Tag]:
    """Card elements in document order. Empty list when nothing looks like a card."""
    cards = _primary(soup)
    if cards:
        log.debug(f"locate strategy=primary cards={len(cards)}")
        return cards
    cards = _fallback(soup)
    log.debug(f"locate strategy=fallback cards={len(cards)}")
    return cards


def to_soup(html: str | bytes | BeautifulSoup) -> BeautifulSoup:
    if isinstance(html, BeautifulSoup):
        return html
    return BeautifulSoup(html, "lxml")


__all__ = ["locate_cards", "to_soup"]
