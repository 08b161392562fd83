"""Field extraction helpers for structured receipt data."""
from .amount import extract_amount
from .date import extract_date
from .merchant import extract_merchant

__all__ = ["extract_amount", "extract_date", "extract_merchant"]
