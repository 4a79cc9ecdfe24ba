"""Idle clicker loop persisting a gold purse into a shared save-slot dict."""
from __future__ import annotations

from idlepurse.adapter import PersistenceAdapter
from idlepurse.config import PurseConfig
from idlepurse.level import Level
from idlepurse.purse import CurrencyPurse


class SaveSlotAdapter(PersistenceAdapter):
    """Stores one currency under ``slot[key]`` as an ``(amount, level)`` pair."""

    def __init__(self, slot: dict, key: str) -> None:
        self.slot = slot
        self.key = key
        self.writes = 0

    def save(self, amount: float, level: Level) -> None:
        self.slot[self.key] = {"amount": amount, "level": int(level)}
        self.writes += 1

    def load_amount(self) -> float:
        return self.slot.get(self.key, {}).get("amount", 0.0)

    def load_level(self) -> Level:
        return Level(self.slot.get(self.key, {}).get("level", 0))


def play(slot: dict, seconds: int, income: float = 750.0, upgrade_cost: float = 5.0) -> int:
    """Earn *income* per second, buying an upgrade (cost in K) whenever possible.

    Each upgrade doubles income. Returns the number of upgrades bought.
    """
    purse = CurrencyPurse(SaveSlotAdapter(slot, "gold"), PurseConfig(save_ticks=10))
    upgrades = 0
    for _ in range(seconds):
        purse.add(income)
        if purse.try_spend(upgrade_cost, Level.K):
            upgrades += 1
            income *= 2
            upgrade_cost *= 3
    purse.force_save()
    return upgrades
