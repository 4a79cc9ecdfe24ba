"""Tests for cli module."""
import json

import pytest

from idlepurse.cli import build_parser, main, open_purse
from idlepurse.level import Level


def _write_purse(path, amount, level):
    path.write_text(json.dumps({"amount": amount, "level": level}))


def test_parser_add_arguments():
    parser = build_parser()
    args = parser.parse_args(["add", "gold.json", "1.5K", "--level", "M"])
    assert args.command == "add"
    assert args.value == "1.5K"
    assert args.level == "M"
    assert args.scaling == "exponential"


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main([])
    assert exc_info.value.code == 0
    assert "idlepurse" in capsys.readouterr().out


def test_show_missing_file(tmp_path, capsys):
    main(["show", str(tmp_path / "gold.json")])
    assert capsys.readouterr().out.strip() == "0.00"


def test_add_persists(tmp_path, capsys):
    path = tmp_path / "gold.json"
    main(["add", str(path), "600"])
    main(["add", str(path), "500"])
    assert capsys.readouterr().out.splitlines() == ["600.00", "1.10K"]

    purse = open_purse(str(path))
    assert purse.amount == pytest.approx(1.1)
    assert purse.level == Level.K


def test_add_with_suffix_and_level_override(tmp_path, capsys):
    path = tmp_path / "gold.json"
    main(["add", str(path), "2K"])
    main(["add", str(path), "3", "--level", "K"])
    assert capsys.readouterr().out.splitlines()[-1] == "5.00K"


def test_linear_scaling_option(tmp_path, capsys):
    path = tmp_path / "gold.json"
    main(["--scaling", "linear", "add", str(path), "3M"])
    assert capsys.readouterr().out.strip() == "6.00K"


def test_subtract(tmp_path, capsys):
    path = tmp_path / "gold.json"
    _write_purse(path, 2, "M")
    main(["subtract", str(path), "1.5M"])
    assert capsys.readouterr().out.strip() == "500.00K"


def test_subtract_insufficient_funds_exits(tmp_path, capsys):
    path = tmp_path / "gold.json"
    _write_purse(path, 1, "K")
    with pytest.raises(SystemExit) as exc_info:
        main(["subtract", str(path), "2K"])
    assert exc_info.value.code == 1
    assert "Insufficient funds" in capsys.readouterr().err
    assert json.loads(path.read_text()) == {"amount": 1, "level": "K"}


def test_bad_value_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["add", str(tmp_path / "gold.json"), "lots"])
    assert exc_info.value.code == 1
    assert "Error: Cannot parse amount" in capsys.readouterr().err


def test_corrupt_file_exits(tmp_path, capsys):
    path = tmp_path / "gold.json"
    path.write_text("{")
    with pytest.raises(SystemExit) as exc_info:
        main(["show", str(path)])
    assert exc_info.value.code == 1
    assert "not valid JSON" in capsys.readouterr().err
