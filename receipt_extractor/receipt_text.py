"""Line handling for recognised receipt text.

OCR output arrives as one blob with a line break between recognised text
lines. Every heuristic works on the same ordered list of lines, so blank
lines are kept: they simply fail the downstream pattern tests, and they
still count when a heuristic looks a fixed number of lines up or down.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple


class ReceiptTextError(ValueError):
    """Base error for receipt text that cannot be accepted."""


class InputTooLargeError(ReceiptTextError):
    """Raised when the text exceeds the configured line limits."""

    def __init__(self, reason: str, limit: int) -> None:
        super().__init__(f"{reason}:{limit}")
        self.reason = reason
        self.limit = limit


@dataclass(frozen=True)
class ReceiptText:
    lines: Tuple[str, ...]

    @property
    def raw_text(self) -> str:
        return "\n".join(self.lines)

    @classmethod
    def from_text(cls, raw_text: Optional[str]) -> "ReceiptText":
        return cls(lines=tuple(split_lines(raw_text)))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "ReceiptText":
        return cls(lines=tuple(lines))

    def check_limits(self, max_lines: int, max_line_length: int) -> None:
        """Reject text that is larger than the service is willing to scan."""

        if len(self.lines) > max_lines:
            raise InputTooLargeError("too_many_lines", max_lines)
        for line in self.lines:
            if len(line) > max_line_length:
                raise InputTooLargeError("line_too_long", max_line_length)


def split_lines(raw_text: Optional[str]) -> List[str]:
    """Split ``raw_text`` on line boundaries, preserving order and blanks."""

    if not raw_text:
        return []
    return raw_text.splitlines()


__all__ = ["InputTooLargeError", "ReceiptText", "ReceiptTextError", "split_lines"]
