"""Merchant extraction from the receipt header.

Receipt headers print the store name, then a secondary line (phone number,
store number), then the street address ending in city, state and zip. The
first line that looks like such an address therefore sits two lines below
the merchant name.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

LOGGER = logging.getLogger(__name__)

ADDRESS_SEPARATOR = ","
POSTAL_CODE_PATTERN = re.compile(r"\d{5}", re.ASCII)
# Distance from the name line down to the address line.
NAME_OFFSET = 2


@dataclass(frozen=True)
class MerchantCandidate:
    value: Optional[str]
    line_index: Optional[int]
    address_line: str
    address_index: int


@dataclass(frozen=True)
class MerchantExtraction:
    best: Optional[MerchantCandidate]
    candidates: List[MerchantCandidate]


def looks_like_address(line: str) -> bool:
    return ADDRESS_SEPARATOR in line and POSTAL_CODE_PATTERN.search(line) is not None


def find_address_line(lines: Sequence[str]) -> Optional[int]:
    for index, line in enumerate(lines):
        if looks_like_address(line):
            return index
    return None


def extract_merchant(lines: Sequence[str]) -> MerchantExtraction:
    address_index = find_address_line(lines)
    if address_index is None:
        return MerchantExtraction(best=None, candidates=[])

    name_index = address_index - NAME_OFFSET
    if name_index < 0:
        LOGGER.debug("merchant_skipped address_index=%d", address_index)
        candidate = MerchantCandidate(
            value=None,
            line_index=None,
            address_line=lines[address_index],
            address_index=address_index,
        )
        return MerchantExtraction(best=None, candidates=[candidate])

    name = lines[name_index].strip()
    candidate = MerchantCandidate(
        value=name or None,
        line_index=name_index,
        address_line=lines[address_index],
        address_index=address_index,
    )
    best = candidate if candidate.value else None
    if best is not None:
        LOGGER.debug("merchant_selected value=%r line=%d", best.value, name_index)
    return MerchantExtraction(best=best, candidates=[candidate])


__all__ = [
    "MerchantCandidate",
    "MerchantExtraction",
    "extract_merchant",
    "find_address_line",
    "looks_like_address",
]
