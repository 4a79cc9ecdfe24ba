from __future__ import annotations

import json
import math
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path

from idlepurse.errors import PersistenceError
from idlepurse.level import Level


class PersistenceAdapter(ABC):
    """Loads and stores purse state on behalf of a CurrencyPurse."""

    @abstractmethod
    def save(self, amount: float, level: Level) -> None: ...

    @abstractmethod
    def load_amount(self) -> float: ...

    @abstractmethod
    def load_level(self) -> Level: ...


class MemoryAdapter(PersistenceAdapter):
    """In-process adapter. Keeps the last saved values and a save history."""

    def __init__(self, amount: float = 0.0, level: Level = Level.NONE) -> None:
        self.amount = amount
        self.level = level
        self.saves: list[tuple[float, Level]] = []

    def save(self, amount: float, level: Level) -> None:
        self.amount = amount
        self.level = level
        self.saves.append((amount, level))

    def load_amount(self) -> float:
        return self.amount

    def load_level(self) -> Level:
        return self.level


class JsonFileAdapter(PersistenceAdapter):
    """Stores purse state as ``{"amount": ..., "level": ...}`` in a JSON file.

    A missing file reads as an empty purse. The file is written atomically
    so a crash mid-save leaves the previous contents intact.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._cache: dict | None = None

    def _read(self) -> dict:
        if self._cache is not None:
            return self._cache
        if not self.path.exists():
            data: dict = {"amount": 0.0, "level": Level.NONE.name}
        else:
            try:
                with open(self.path, encoding="utf-8") as f:
                    data = json.load(f)
            except (json.JSONDecodeError, UnicodeDecodeError) as exc:
                raise PersistenceError(
                    f"Purse file {str(self.path)!r} is not valid JSON: {exc}"
                ) from exc
            if not isinstance(data, dict):
                raise PersistenceError(
                    f"Purse file {str(self.path)!r} must contain a JSON object"
                )
        self._cache = data
        return data

    def load_amount(self) -> float:
        raw = self._read().get("amount", 0.0)
        if (
            isinstance(raw, bool)
            or not isinstance(raw, (int, float))
            or not math.isfinite(raw)
        ):
            raise PersistenceError(f"Invalid amount in purse file: {raw!r}")
        return float(raw)

    def load_level(self) -> Level:
        raw = self._read().get("level", Level.NONE.name)
        try:
            return Level.parse(raw)
        except (ValueError, TypeError) as exc:
            raise PersistenceError(f"Invalid level in purse file: {raw!r}") from exc

    def save(self, amount: float, level: Level) -> None:
        data = {"amount": amount, "level": Level(level).name}
        directory = self.path.parent
        directory.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=directory, prefix=".purse-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
            os.replace(tmp, self.path)
        finally:
            if os.path.exists(tmp):
                os.unlink(tmp)
        self._cache = data
