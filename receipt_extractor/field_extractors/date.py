"""Date extraction helpers.

Lines are scanned top to bottom. The first date-shaped token on a line is
normalised and parsed against ``DATE_FORMATS`` in order; the first line that
yields a real calendar date ends the scan. A token that is date-shaped but
not a valid date (item codes, phone fragments) does not stop the scan.
"""
from __future__ import annotations

import datetime as dt
import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

LOGGER = logging.getLogger(__name__)

DATE_PATTERNS = [
    re.compile(r"\b\d{1,2}[/-]\d{1,2}[/-]\d{2,4}\b", re.ASCII),
    re.compile(r"\b[A-Za-z]+\s\d{1,2},\s\d{4}\b", re.ASCII),
]
DATE_TOKEN_PATTERN = re.compile("|".join(pattern.pattern for pattern in DATE_PATTERNS), re.ASCII)

SHORT_YEAR_PATTERN = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{2})", re.ASCII)
CENTURY_PREFIX = "20"

DATE_FORMATS = [
    "%m/%d/%Y",
    "%m-%d-%Y",
    "%Y-%m-%d",
    "%m/%d/%y",
    "%B %d, %Y",
]


@dataclass(frozen=True)
class DateCandidate:
    value: Optional[dt.date]
    raw_text: str
    normalised_text: str
    line_index: int
    date_format: Optional[str] = None


@dataclass(frozen=True)
class DateExtraction:
    best: Optional[DateCandidate]
    candidates: List[DateCandidate]


def normalise_token(token: str) -> str:
    """Expand a slash-separated two digit year, ``12/17/24`` -> ``12/17/2024``."""

    match = SHORT_YEAR_PATTERN.fullmatch(token)
    if not match:
        return token
    month, day, year = match.groups()
    return f"{month}/{day}/{CENTURY_PREFIX}{year}"


def parse_token(token: str) -> Tuple[Optional[dt.date], Optional[str]]:
    for date_format in DATE_FORMATS:
        try:
            return dt.datetime.strptime(token, date_format).date(), date_format
        except ValueError:
            continue
    return None, None


def find_date_token(line: str) -> Optional[str]:
    match = DATE_TOKEN_PATTERN.search(line)
    return match.group(0) if match else None


def extract_date(lines: Sequence[str]) -> DateExtraction:
    collected: List[DateCandidate] = []
    for index, line in enumerate(lines):
        token = find_date_token(line)
        if token is None:
            continue
        normalised = normalise_token(token)
        value, date_format = parse_token(normalised)
        candidate = DateCandidate(
            value=value,
            raw_text=token,
            normalised_text=normalised,
            line_index=index,
            date_format=date_format,
        )
        collected.append(candidate)
        if value is not None:
            LOGGER.debug("date_selected value=%s line=%d format=%s", value, index, date_format)
            return DateExtraction(best=candidate, candidates=collected)
        LOGGER.debug("date_token_unparsed token=%r line=%d", token, index)
    return DateExtraction(best=None, candidates=collected)


__all__ = [
    "DATE_FORMATS",
    "DATE_PATTERNS",
    "DateCandidate",
    "DateExtraction",
    "extract_date",
    "normalise_token",
    "parse_token",
]
