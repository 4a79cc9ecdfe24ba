"""Tests for formatting module."""
import pytest

from idlepurse.adapter import MemoryAdapter
from idlepurse.formatting import format_amount, format_purse, parse_amount
from idlepurse.level import Level
from idlepurse.purse import CurrencyPurse


def test_format_amount():
    assert format_amount(1.1, Level.K) == "1.10K"
    assert format_amount(500, Level.NONE) == "500.00"
    assert format_amount(3.14159, Level.QQ, precision=3) == "3.142QQ"


def test_format_purse_and_snapshot():
    purse = CurrencyPurse(MemoryAdapter(12.5, Level.M))
    assert format_purse(purse) == "12.50M"
    assert format_purse(purse.snapshot(), precision=0) == "12M"


def test_parse_amount():
    assert parse_amount("1.5K") == (1.5, Level.K)
    assert parse_amount("250") == (250.0, Level.NONE)
    assert parse_amount(" 7 QQ ") == (7.0, Level.QQ)
    assert parse_amount(".5M") == (0.5, Level.M)


def test_parse_amount_invalid():
    with pytest.raises(ValueError, match="Cannot parse"):
        parse_amount("-3K")
    with pytest.raises(ValueError, match="Cannot parse"):
        parse_amount("abc")
    with pytest.raises(ValueError, match="Unknown level"):
        parse_amount("3X")
