"""FastAPI router definitions for the receipt extraction service."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from datetime import date
from decimal import Decimal
from typing import Any, AsyncIterator, Dict, List, Optional

from fastapi import Depends, FastAPI, Header, HTTPException, status
from pydantic import BaseModel

from .extractor import DetailedExtraction, extract_detailed
from .field_extractors import amount, date as date_extractor, merchant
from .receipt_text import InputTooLargeError, ReceiptText
from .security import verify_api_token
from .settings import Settings, get_settings

LOGGER = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level)
    LOGGER.info(
        "Receipt extraction service ready max_lines=%d max_line_length=%d auth=%s",
        settings.max_lines,
        settings.max_line_length,
        "token" if settings.api_token else "open",
    )
    yield


app = FastAPI(title="Receipt Field Extraction Service", lifespan=lifespan)


class ExtractRequest(BaseModel):
    text: Optional[str] = None
    lines: Optional[List[str]] = None


class ExtractResponse(BaseModel):
    merchant_name: Optional[str] = None
    amount: Optional[Decimal] = None
    transaction_date: Optional[date] = None
    line_count: int
    candidates: Dict[str, Any]


def _receipt_text(payload: ExtractRequest) -> ReceiptText:
    if payload.text is not None and payload.lines is not None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="ambiguous_input")
    if payload.lines is not None:
        return ReceiptText.from_lines(payload.lines)
    if payload.text is not None:
        return ReceiptText.from_text(payload.text)
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="missing_text")


def _format_amount_candidates(candidates: List[amount.AmountCandidate]) -> List[Dict[str, Any]]:
    formatted = []
    for candidate in candidates:
        formatted.append(
            {
                "value": str(candidate.value),
                "raw_text": candidate.raw_text,
                "line_index": candidate.line_index,
            }
        )
    return formatted


def _format_date_candidates(candidates: List[date_extractor.DateCandidate]) -> List[Dict[str, Any]]:
    return [
        {
            "value": candidate.value.isoformat() if candidate.value else None,
            "raw_text": candidate.raw_text,
            "normalised_text": candidate.normalised_text,
            "line_index": candidate.line_index,
            "format": candidate.date_format,
        }
        for candidate in candidates
    ]


def _format_merchant_candidates(candidates: List[merchant.MerchantCandidate]) -> List[Dict[str, Any]]:
    return [
        {
            "value": candidate.value,
            "line_index": candidate.line_index,
            "address_line": candidate.address_line,
            "address_index": candidate.address_index,
        }
        for candidate in candidates
    ]


def _build_response(detailed: DetailedExtraction, line_count: int) -> ExtractResponse:
    result = detailed.result
    return ExtractResponse(
        merchant_name=result.merchant_name,
        amount=result.amount,
        transaction_date=result.transaction_date,
        line_count=line_count,
        candidates={
            "merchant": _format_merchant_candidates(detailed.merchant.candidates),
            "amount": _format_amount_candidates(detailed.amount.candidates),
            "date": _format_date_candidates(detailed.date.candidates),
        },
    )


@app.post("/extract", response_model=ExtractResponse)
async def extract_receipt(
    payload: ExtractRequest,
    authorization: Optional[str] = Header(default=None),
    settings: Settings = Depends(get_settings),
) -> ExtractResponse:
    verify_api_token(authorization, settings)

    receipt = _receipt_text(payload)
    try:
        receipt.check_limits(settings.max_lines, settings.max_line_length)
    except InputTooLargeError as exc:
        LOGGER.warning("Rejected receipt text: %s", exc)
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=exc.reason) from exc

    detailed = extract_detailed(receipt.lines)
    LOGGER.info(
        "Extracted receipt fields lines=%d merchant=%s amount=%s date=%s",
        len(receipt.lines),
        detailed.result.merchant_name is not None,
        detailed.result.amount is not None,
        detailed.result.transaction_date is not None,
    )
    return _build_response(detailed, len(receipt.lines))


@app.get("/healthz")
async def healthz() -> Dict[str, str]:
    return {"status": "ok"}


__all__ = ["ExtractRequest", "ExtractResponse", "app", "extract_receipt"]
