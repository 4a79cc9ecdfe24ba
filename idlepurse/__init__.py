# idlepurse: order-of-magnitude currency purse with pluggable persistence

from idlepurse.level import LEVEL_STEP, MAX_LEVEL, MIN_LEVEL, Level
from idlepurse.errors import (
    InsufficientFundsError,
    PersistenceError,
    PurseError,
    UninitializedPurseError,
)
from idlepurse.config import PurseConfig, ScalingMode
from idlepurse.adapter import JsonFileAdapter, MemoryAdapter, PersistenceAdapter
from idlepurse.purse import CurrencyPurse, PurseSnapshot
from idlepurse.formatting import format_amount, format_purse, parse_amount

__all__ = [
    # Levels
    "Level",
    "LEVEL_STEP",
    "MIN_LEVEL",
    "MAX_LEVEL",
    # Errors
    "PurseError",
    "UninitializedPurseError",
    "InsufficientFundsError",
    "PersistenceError",
    # Config
    "PurseConfig",
    "ScalingMode",
    # Persistence
    "PersistenceAdapter",
    "MemoryAdapter",
    "JsonFileAdapter",
    # Purse
    "CurrencyPurse",
    "PurseSnapshot",
    # Formatting
    "format_amount",
    "format_purse",
    "parse_amount",
]
