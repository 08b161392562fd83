"""Receipt field extraction from OCR text."""
from .extractor import ExtractionResult, extract, extract_text

__all__ = ["ExtractionResult", "extract", "extract_text"]
