from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class ScalingMode(Enum):
    """How an amount is converted between two levels."""

    # 1000 ** |distance|
    EXPONENTIAL = auto()
    # 1000 * |distance|, kept for parity with saves produced by older builds
    LINEAR = auto()


@dataclass
class PurseConfig:
    """Tuning knobs for a CurrencyPurse."""

    save_ticks: int = 1
    scaling: ScalingMode = ScalingMode.EXPONENTIAL
    allow_negative: bool = False

    def validate(self) -> list[str]:
        """Return a list of problems. Empty list means the config is usable."""
        errors: list[str] = []
        if isinstance(self.save_ticks, bool) or not isinstance(self.save_ticks, int):
            errors.append(f"save_ticks must be an int, got {self.save_ticks!r}")
        elif self.save_ticks < 1:
            errors.append(f"save_ticks must be at least 1, got {self.save_ticks}")
        if not isinstance(self.scaling, ScalingMode):
            errors.append(f"Unknown scaling mode: {self.scaling!r}")
        return errors
