from __future__ import annotations

import re

from idlepurse.level import Level
from idlepurse.purse import CurrencyPurse, PurseSnapshot

_AMOUNT_RE = re.compile(r"^\s*([0-9]+(?:\.[0-9]*)?|\.[0-9]+)\s*([A-Za-z]*)\s*$")


def format_amount(amount: float, level: Level, precision: int = 2) -> str:
    """Render an amount with its level suffix, e.g. ``1.10K``."""
    return f"{amount:.{precision}f}{Level(level).suffix}"


def format_purse(purse: CurrencyPurse | PurseSnapshot, precision: int = 2) -> str:
    return format_amount(purse.amount, purse.level, precision)


def parse_amount(text: str) -> tuple[float, Level]:
    """Parse ``"1.5K"``-style input into ``(1.5, Level.K)``.

    A bare number is taken at ``Level.NONE``.
    """
    m = _AMOUNT_RE.match(text)
    if m is None:
        raise ValueError(f"Cannot parse amount: {text!r}")
    number, suffix = m.groups()
    return float(number), Level.parse(suffix)
