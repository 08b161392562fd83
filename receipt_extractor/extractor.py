"""Structured field extraction from recognised receipt lines.

``extract`` is a pure function: it reads the lines, runs the merchant, amount
and date heuristics independently and returns an immutable result. A field
the heuristics cannot find is ``None``; nothing here raises because of what
the text contains.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Sequence

from .field_extractors import amount, date, merchant
from .receipt_text import ReceiptText


@dataclass(frozen=True)
class ExtractionResult:
    merchant_name: Optional[str] = None
    amount: Optional[Decimal] = None
    transaction_date: Optional[dt.date] = None


@dataclass(frozen=True)
class DetailedExtraction:
    """Extraction result together with the candidates each heuristic saw."""

    result: ExtractionResult
    merchant: merchant.MerchantExtraction
    amount: amount.AmountExtraction
    date: date.DateExtraction


def extract_detailed(lines: Sequence[str]) -> DetailedExtraction:
    merchant_info = merchant.extract_merchant(lines)
    amount_info = amount.extract_amount(lines)
    date_info = date.extract_date(lines)

    result = ExtractionResult(
        merchant_name=merchant_info.best.value if merchant_info.best else None,
        amount=amount_info.best.value if amount_info.best else None,
        transaction_date=date_info.best.value if date_info.best else None,
    )
    return DetailedExtraction(result=result, merchant=merchant_info, amount=amount_info, date=date_info)


def extract(lines: Sequence[str]) -> ExtractionResult:
    """Extract merchant name, total amount and transaction date from ``lines``."""

    return extract_detailed(lines).result


def extract_text(raw_text: Optional[str]) -> ExtractionResult:
    """Split ``raw_text`` into lines and run :func:`extract` on them."""

    return extract(ReceiptText.from_text(raw_text).lines)


__all__ = ["DetailedExtraction", "ExtractionResult", "extract", "extract_detailed", "extract_text"]
