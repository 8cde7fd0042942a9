from __future__ import annotations
"""Selectors and label patterns for the programme search result page.

Observed on universityadmissions.se (2025). When the site markup drifts,
adjust this table; the extraction code only refers to these names.
"""
import re
from typing import Tuple


# ---- Card Locator ----
CARD_SELECTOR = ".searchresultcard"
FALLBACK_CONTAINER_SELECTOR = "article, section, li, div"
LISTING_TEXT_RE = re.compile(
    r"credits?|application\s+code|language\s+of\s+instruction|tuition\s+fee|master|second-cycle|advanced\s+level",
    re.IGNORECASE,
)

# ---- Label-Value Extractor ----
DEFINITION_TERM_SELECTOR = "dt"
DEFINITION_VALUE_TAG = "dd"
INLINE_CANDIDATE_SELECTOR = "li, p, div, span, dd"
INLINE_FIELD_TERMINATOR = "|"

# ---- Structural positions (no reliable label) ----
TITLE_SELECTORS: Tuple[str, ...] = ("h3", "h2", ".resultcard_title", "h4")
HEADER_SELECTORS: Tuple[str, ...] = (".header_info > p", ".header_info")
HEADER_FALLBACK_SELECTOR = "p, li, span"
STATUS_SELECTORS: Tuple[str, ...] = (".applicable_status p", ".applicable_status", ".status")

# "120 Credits, Stockholm University, Location: Stockholm"
HEADER_LINE_RE = re.compile(r"(\d+) Credits?, (.+), Location: (.+)", re.IGNORECASE)

# ---- Field labels (regex alternations, tried left to right) ----
def labelled(*names: str) -> str:
    """Label alternation that must be followed by a colon or end of text.

    "Period: Autumn 2025" matches, "Application period not open" does not.
    """
    return rf"\b(?:{'|'.join(names)})(?=\s*(?::|$))"


LABEL_CREDITS = labelled(r"Credits?")
LABEL_UNIVERSITY = labelled(r"University", r"Institution")
LABEL_LOCATION = labelled(r"Location", r"Place of study")
LABEL_FIRST_TUITION_FEE = labelled(r"First tuition fee instalment", r"First instalment")
LABEL_TOTAL_TUITION_FEE = labelled(r"Total tuition fee")
LABEL_PERIOD = labelled(r"Period")
LABEL_LEVEL = labelled(r"Level")
LABEL_LANGUAGE = labelled(r"Language of instruction", r"Teaching language")
LABEL_APPLICATION_CODE = labelled(r"Application code")
LABEL_TEACHING_FORM = labelled(r"Teaching form", r"Form of study")
LABEL_PACE = labelled(r"Pace of study", r"Pace")
LABEL_INSTRUCTIONAL_TIME = labelled(r"Instructional time", r"Time of study")
LABEL_SUBJECT_AREAS = labelled(r"Subject areas?")

# ---- Full-text scans (last resort, one capture group each) ----
# no digit or separator on the left: "7.5 credits" is not 5
CREDITS_TEXT_RE = re.compile(r"(?<![\d.,])(\d{1,5})\s*credits?\b", re.IGNORECASE)
LEVEL_TEXT_RE = re.compile(r"\b(Second-cycle|First-cycle|Advanced level)\b", re.IGNORECASE)
FIRST_TUITION_FEE_TEXT_RE = re.compile(
    r"First (?:tuition fee )?instalment\s*:?\s*([0-9][0-9 .,\u00a0\u202f]*)", re.IGNORECASE
)
TOTAL_TUITION_FEE_TEXT_RE = re.compile(
    r"Total tuition fee\s*:?\s*([0-9][0-9 .,\u00a0\u202f]*)", re.IGNORECASE
)
