from __future__ import annotations

from receipt_extractor.field_extractors.merchant import extract_merchant, looks_like_address


def test_merchant_is_two_lines_above_address() -> None:
    result = extract_merchant(["Acme Goods", "555-1234", "123 Main St, Springfield, IL 62704"])
    assert result.best is not None
    assert result.best.value == "Acme Goods"
    assert result.best.address_index == 2


def test_merchant_name_is_trimmed() -> None:
    result = extract_merchant(["header", "  Blue Bottle Coffee \t", "Store 12", "1 Ferry Bldg, SF, CA 94111"])
    assert result.best is not None
    assert result.best.value == "Blue Bottle Coffee"
    assert result.best.line_index == 1


def test_address_at_index_one_yields_no_merchant() -> None:
    result = extract_merchant(["X", "123 Main St, Springfield, IL 62704"])
    assert result.best is None
    assert result.candidates[0].address_index == 1


def test_address_at_index_zero_yields_no_merchant() -> None:
    assert extract_merchant(["123 Main St, Springfield, IL 62704", "Acme"]).best is None


def test_only_the_first_address_line_is_used() -> None:
    lines = [
        "Acme Goods",
        "1 Elm St, Town, CA 90001",
        "Returns",
        "Call us",
        "2 Oak St, Town, CA 90002",
    ]
    assert extract_merchant(lines).best is None


def test_no_address_line_means_no_merchant() -> None:
    result = extract_merchant(["Acme Goods", "555-1234", "123 Main St Springfield IL 62704"])
    assert result.best is None
    assert result.candidates == []


def test_blank_name_line_is_absent() -> None:
    assert extract_merchant(["", "Store 4", "9 Pine Rd, Ames, IA 50010"]).best is None


def test_address_signal_needs_comma_and_five_digits() -> None:
    assert looks_like_address("Springfield, IL 62704")
    assert not looks_like_address("Springfield IL 62704")
    assert not looks_like_address("Springfield, IL 6270")
