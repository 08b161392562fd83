from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def receipt_lines() -> list[str]:
    return [
        "Corner Market",
        "Store #0412  (217) 555-1234",
        "123 Main St, Springfield, IL 62704",
        "",
        "12/17/24 14:02",
        "Bananas        $1.29",
        "Coffee Beans   $11.21",
        "Subtotal $12.50",
        "Tax $0.75",
        "Tip $1.50",
        "Total $14.75",
    ]
