"""Rule-based amount extraction utilities.

Receipts list several dollar figures (items, subtotal, tax, tip, total) and
the grand total is nearly always the largest of them, so the largest
dollar-prefixed figure anywhere on the receipt is taken as the amount. This
avoids relying on the word "total", which OCR mangles often.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import List, Optional, Sequence

LOGGER = logging.getLogger(__name__)

CURRENCY_SYMBOL = "$"
AMOUNT_PATTERN = re.compile(r"\$(\d+(\.\d{1,2})?)", re.ASCII)


@dataclass(frozen=True)
class AmountCandidate:
    value: Decimal
    raw_text: str
    line_index: int


@dataclass(frozen=True)
class AmountExtraction:
    best: Optional[AmountCandidate]
    candidates: List[AmountCandidate]


def _parse_amount(text: str) -> Optional[Decimal]:
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


def extract_amount(lines: Sequence[str]) -> AmountExtraction:
    """Return the largest strictly positive dollar amount in ``lines``."""

    candidates: List[AmountCandidate] = []
    best: Optional[AmountCandidate] = None
    largest = Decimal(0)
    for index, line in enumerate(lines):
        if CURRENCY_SYMBOL not in line:
            continue
        for match in AMOUNT_PATTERN.finditer(line):
            value = _parse_amount(match.group(1))
            if value is None:
                continue
            candidate = AmountCandidate(value=value, raw_text=match.group(0), line_index=index)
            candidates.append(candidate)
            if value > largest:
                largest = value
                best = candidate

    if best is not None:
        LOGGER.debug("amount_selected value=%s line=%d", best.value, best.line_index)
    return AmountExtraction(best=best, candidates=candidates)


__all__ = ["AMOUNT_PATTERN", "AmountCandidate", "AmountExtraction", "extract_amount"]
