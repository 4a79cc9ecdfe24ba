from __future__ import annotations


class PurseError(Exception):
    """Base class for purse failures."""


class UninitializedPurseError(PurseError, RuntimeError):
    """The purse was used before an adapter was injected."""

    def __init__(self, operation: str = "access") -> None:
        super().__init__(
            f"Cannot {operation}: the currency purse is not initialized"
        )
        self.operation = operation


class InsufficientFundsError(PurseError, ValueError):
    """A subtraction would take the balance below zero."""

    def __init__(self, requested: float, available: float) -> None:
        super().__init__(
            f"Insufficient funds: requested {requested:g} (base units), "
            f"available {available:g}"
        )
        self.requested = requested
        self.available = available


class PersistenceError(PurseError):
    """A bundled adapter could not read or write purse data."""
