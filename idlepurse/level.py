from __future__ import annotations

from enum import IntEnum

# Ratio between two adjacent levels
LEVEL_STEP = 1000


class Level(IntEnum):
    """Order of magnitude a purse amount is expressed in."""

    NONE = 0
    K = 1
    M = 2
    B = 3
    T = 4
    Q = 5
    QQ = 6

    @property
    def suffix(self) -> str:
        return "" if self is Level.NONE else self.name

    @property
    def multiplier(self) -> float:
        """Value of one unit at this level, in base units."""
        return float(LEVEL_STEP ** self.value)

    @classmethod
    def parse(cls, text: str | int | Level) -> Level:
        """Resolve a level from its name, suffix or ordinal."""
        if isinstance(text, Level):
            return text
        if isinstance(text, int):
            return cls(text)
        if not isinstance(text, str):
            raise TypeError(f"Cannot parse a level from {type(text).__name__}")
        key = text.strip()
        if key == "" or key.upper() == "NONE":
            return cls.NONE
        try:
            return cls[key]
        except KeyError:
            raise ValueError(
                f"Unknown level: {text!r}. Expected one of "
                f"{[lv.name for lv in cls]}"
            ) from None


MIN_LEVEL = Level.NONE
MAX_LEVEL = Level.QQ
