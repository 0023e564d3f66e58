import pytest

from src.app.services.parsing import (
    parse_non_negative_float,
    parse_non_negative_int,
    parse_optional_non_negative_float,
)


@pytest.mark.parametrize(
    "raw, expected",
    [("12", 12), (" 7 ", 7), ("", 0), (None, 0), ("abc", 0), ("-4", 0), ("2.9", 2), (5, 5), (3.7, 3), ("nan", 0)],
)
def test_parse_non_negative_int(raw, expected):
    assert parse_non_negative_int(raw) == expected


@pytest.mark.parametrize(
    "raw, expected",
    [("50", 50.0), ("12.5", 12.5), ("1,200", 1200.0), ("", 0.0), (None, 0.0), ("x", 0.0), ("-1", 0.0), ("inf", 0.0), (30, 30.0)],
)
def test_parse_non_negative_float(raw, expected):
    assert parse_non_negative_float(raw) == expected


def test_optional_float_keeps_blank_as_none():
    assert parse_optional_non_negative_float("") is None
    assert parse_optional_non_negative_float(None) is None
    assert parse_optional_non_negative_float("500") == 500.0
