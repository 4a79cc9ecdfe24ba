from __future__ import annotations

import math
import warnings
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from idlepurse.config import PurseConfig, ScalingMode
from idlepurse.errors import (
    InsufficientFundsError,
    PersistenceError,
    UninitializedPurseError,
)
from idlepurse.level import LEVEL_STEP, MAX_LEVEL, MIN_LEVEL, Level

if TYPE_CHECKING:
    from idlepurse.adapter import PersistenceAdapter

# Sums that cancel to within this many ulps of the larger operand are exactly zero
_ZERO_ULPS = 4


@dataclass(frozen=True)
class PurseSnapshot:
    """Read-only copy of a purse balance."""

    amount: float
    level: Level

    @property
    def total(self) -> float:
        return self.amount * self.level.multiplier


class CurrencyPurse:
    """A currency balance stored as a float plus an order of magnitude.

    The purse is unusable until an adapter has been injected, either through
    the constructor or a later call to :meth:`init`. Every add/subtract is a
    *tick*; once ``save_ticks`` ticks have accumulated the adapter's ``save``
    is called and the counter starts over.
    """

    def __init__(
        self,
        adapter: PersistenceAdapter | None = None,
        config: PurseConfig | None = None,
    ) -> None:
        # Copied so the save_ticks setter never leaks into a shared config
        self.config = replace(config) if config is not None else PurseConfig()
        errors = self.config.validate()
        if errors:
            raise ValueError(
                "Invalid PurseConfig:\n" + "\n".join(f"  - {e}" for e in errors)
            )

        self._amount = 0.0
        self._level = Level.NONE
        self._adapter: PersistenceAdapter | None = None
        self._initialized = False
        self._ticks = 0

        if adapter is not None:
            self.init(adapter)

    # ── Lifecycle ────────────────────────────────────────────────────

    def init(self, adapter: PersistenceAdapter) -> None:
        """Inject the adapter and load the stored balance. Runs only once."""
        if self._initialized:
            if adapter is not self._adapter:
                warnings.warn(
                    "CurrencyPurse is already initialized; ignoring the new adapter",
                    RuntimeWarning,
                    stacklevel=2,
                )
            return

        # Load before flipping state so a failing adapter leaves us uninitialized
        amount = float(adapter.load_amount())
        level = Level.parse(adapter.load_level())
        if not math.isfinite(amount):
            raise PersistenceError(f"Adapter returned a non-finite amount: {amount!r}")
        if amount < 0 and not self.config.allow_negative:
            raise PersistenceError(
                f"Adapter returned a negative amount: {amount!r} "
                "(negative balances are disabled)"
            )

        self._adapter = adapter
        self._amount = amount
        self._level = level
        self._initialized = True
        self._normalize()

    @property
    def initialized(self) -> bool:
        return self._initialized

    # ── Accessors ────────────────────────────────────────────────────

    @property
    def amount(self) -> float:
        self._require_init("read amount")
        return self._amount

    @property
    def level(self) -> Level:
        self._require_init("read level")
        return self._level

    @property
    def total(self) -> float:
        """Balance expressed in base units."""
        self._require_init("read total")
        return self._amount * self._level.multiplier

    def snapshot(self) -> PurseSnapshot:
        self._require_init("snapshot")
        return PurseSnapshot(self._amount, self._level)

    @property
    def save_ticks(self) -> int:
        return self.config.save_ticks

    @save_ticks.setter
    def save_ticks(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise ValueError(f"save_ticks must be a positive int, got {value!r}")
        self.config.save_ticks = value

    @property
    def pending_ticks(self) -> int:
        """Transactions recorded since the last save."""
        return self._ticks

    # ── Transactions ─────────────────────────────────────────────────

    def add(self, to_add: float, level: Level | str | int = Level.NONE) -> None:
        """Add *to_add* units of *level* to the balance."""
        self._require_init("add")
        value = _check_value(to_add)
        level = Level.parse(level)

        self._amount = _combine(self._amount, self._scale(value, level - self._level))
        self._normalize()
        self._tick()

    def subtract(self, to_remove: float, level: Level | str | int = Level.NONE) -> None:
        """Remove *to_remove* units of *level* from the balance.

        Raises InsufficientFundsError, leaving the purse untouched, when the
        balance would drop below zero and negative balances are disabled.
        """
        self._require_init("subtract")
        value = _check_value(to_remove)
        level = Level.parse(level)

        new_amount = _combine(self._amount, -self._scale(value, level - self._level))
        if new_amount < 0 and not self.config.allow_negative:
            raise InsufficientFundsError(
                requested=self._scale(value, level - MIN_LEVEL),
                available=self._scale(self._amount, self._level - MIN_LEVEL),
            )

        self._amount = new_amount
        self._normalize()
        self._tick()

    def can_afford(self, cost: float, level: Level | str | int = Level.NONE) -> bool:
        self._require_init("check balance")
        value = _check_value(cost)
        level = Level.parse(level)
        return _combine(self._amount, -self._scale(value, level - self._level)) >= 0

    def try_spend(self, cost: float, level: Level | str | int = Level.NONE) -> bool:
        """Subtract *cost* if the purse can cover it. Returns True on success."""
        if not self.can_afford(cost, level):
            return False
        self.subtract(cost, level)
        return True

    # ── Persistence ──────────────────────────────────────────────────

    def force_save(self) -> None:
        """Save now, regardless of how many ticks are pending."""
        self._require_init("save")
        self._save()

    def _tick(self) -> None:
        self._ticks += 1
        if self._ticks >= self.config.save_ticks:
            self._save()

    def _save(self) -> None:
        self._adapter.save(self._amount, self._level)
        self._ticks = 0

    # ── Internals ────────────────────────────────────────────────────

    def _require_init(self, operation: str) -> None:
        if not self._initialized:
            raise UninitializedPurseError(operation)

    def _scale(self, value: float, distance: int) -> float:
        """Express *value*, given *distance* levels away, in current units."""
        if distance == 0:
            return value
        steps = abs(distance)
        if self.config.scaling is ScalingMode.LINEAR:
            factor = LEVEL_STEP * steps
        else:
            factor = LEVEL_STEP ** steps
        return value * factor if distance > 0 else value / factor

    def _normalize(self) -> None:
        if self._amount == 0:
            self._amount = 0.0
            self._level = Level.NONE
            return

        while abs(self._amount) >= LEVEL_STEP and self._level < MAX_LEVEL:
            self._level = Level(self._level + 1)
            self._amount /= LEVEL_STEP

        while abs(self._amount) < 1 and self._level > MIN_LEVEL:
            self._level = Level(self._level - 1)
            self._amount *= LEVEL_STEP

        if abs(self._amount) >= LEVEL_STEP:
            warnings.warn(
                f"Purse saturated at level {MAX_LEVEL.name}: amount {self._amount:g}",
                RuntimeWarning,
                stacklevel=3,
            )

    def __repr__(self) -> str:
        if not self._initialized:
            return "CurrencyPurse(uninitialized)"
        return f"CurrencyPurse(amount={self._amount!r}, level={self._level.name})"


def _combine(current: float, delta: float) -> float:
    total = current + delta
    if delta and abs(total) <= _ZERO_ULPS * math.ulp(max(abs(current), abs(delta))):
        return 0.0
    return total


def _check_value(value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Amount must be a number, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValueError(f"Amount must be finite, got {value!r}")
    if value < 0:
        raise ValueError(f"Amount must not be negative, got {value!r}")
    return float(value)
