"""Tests for adapter module."""
import json

import pytest

from idlepurse.adapter import JsonFileAdapter, MemoryAdapter, PersistenceAdapter
from idlepurse.errors import PersistenceError
from idlepurse.level import Level
from idlepurse.purse import CurrencyPurse


def test_adapter_requires_all_methods():
    class SaveOnly(PersistenceAdapter):
        def save(self, amount, level):
            pass

    with pytest.raises(TypeError):
        SaveOnly()


def test_memory_adapter_records_saves():
    adapter = MemoryAdapter(5.0, Level.K)
    assert adapter.load_amount() == 5.0
    assert adapter.load_level() == Level.K
    adapter.save(6.0, Level.M)
    assert adapter.load_amount() == 6.0
    assert adapter.load_level() == Level.M
    assert adapter.saves == [(6.0, Level.M)]


def test_json_missing_file_is_empty_purse(tmp_path):
    adapter = JsonFileAdapter(tmp_path / "gold.json")
    assert adapter.load_amount() == 0.0
    assert adapter.load_level() == Level.NONE


def test_json_save_and_reload(tmp_path):
    path = tmp_path / "saves" / "gold.json"
    JsonFileAdapter(path).save(1.25, Level.B)

    with open(path) as f:
        assert json.load(f) == {"amount": 1.25, "level": "B"}

    fresh = JsonFileAdapter(path)
    assert fresh.load_amount() == 1.25
    assert fresh.load_level() == Level.B
    assert [p.name for p in path.parent.iterdir()] == ["gold.json"]


def test_json_purse_round_trip(tmp_path):
    path = tmp_path / "gold.json"
    purse = CurrencyPurse(JsonFileAdapter(path))
    purse.add(1500)

    reopened = CurrencyPurse(JsonFileAdapter(path))
    assert reopened.amount == pytest.approx(1.5)
    assert reopened.level == Level.K


def test_json_invalid_content(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    with pytest.raises(PersistenceError, match="not valid JSON"):
        JsonFileAdapter(path).load_amount()

    path.write_text("[1, 2]")
    with pytest.raises(PersistenceError, match="JSON object"):
        JsonFileAdapter(path).load_amount()


def test_json_invalid_fields(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"amount": "lots", "level": "ZZ"}))
    adapter = JsonFileAdapter(path)
    with pytest.raises(PersistenceError, match="Invalid amount"):
        adapter.load_amount()
    with pytest.raises(PersistenceError, match="Invalid level"):
        adapter.load_level()


def test_json_non_finite_amount(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text('{"amount": NaN, "level": "K"}')
    with pytest.raises(PersistenceError, match="Invalid amount"):
        JsonFileAdapter(path).load_amount()

    path.write_text('{"amount": Infinity, "level": "K"}')
    with pytest.raises(PersistenceError, match="Invalid amount"):
        CurrencyPurse(JsonFileAdapter(path))


def test_json_invalid_utf8(tmp_path):
    path = tmp_path / "bad.json"
    path.write_bytes(b'{"amount": 1, "level": "\xff"}')
    with pytest.raises(PersistenceError, match="not valid JSON"):
        JsonFileAdapter(path).load_amount()
