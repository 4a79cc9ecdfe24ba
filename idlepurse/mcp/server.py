"""MCP server wrapping a CurrencyPurse for interactive AI playtesting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from mcp.server.fastmcp import FastMCP

from idlepurse.errors import InsufficientFundsError
from idlepurse.formatting import format_purse
from idlepurse.level import Level
from idlepurse.purse import CurrencyPurse


@dataclass
class _PurseHolder:
    """Holds the purse served by this process."""

    purse: CurrencyPurse
    name: str = "purse"


def _balance(purse: CurrencyPurse) -> dict[str, Any]:
    return {
        "amount": round(purse.amount, 6),
        "level": purse.level.name,
        "display": format_purse(purse),
        "total": purse.total,
    }


# ── Tool logic functions (testable without MCP protocol) ────────────


def _tool_get_balance(holder: _PurseHolder) -> dict[str, Any]:
    result = _balance(holder.purse)
    result["name"] = holder.name
    result["pending_ticks"] = holder.purse.pending_ticks
    result["save_ticks"] = holder.purse.save_ticks
    return result


def _parse_request(value: float, level: str) -> tuple[float, Level] | dict[str, Any]:
    if value < 0:
        return {"error": "Value must not be negative"}
    try:
        return float(value), Level.parse(level)
    except ValueError as exc:
        return {"error": str(exc)}


def _tool_add(holder: _PurseHolder, value: float, level: str = "") -> dict[str, Any]:
    request = _parse_request(value, level)
    if isinstance(request, dict):
        return request
    amount, lv = request
    holder.purse.add(amount, lv)
    return {"success": True, **_balance(holder.purse)}


def _tool_subtract(
    holder: _PurseHolder, value: float, level: str = ""
) -> dict[str, Any]:
    request = _parse_request(value, level)
    if isinstance(request, dict):
        return request
    amount, lv = request
    try:
        holder.purse.subtract(amount, lv)
    except InsufficientFundsError as exc:
        return {"success": False, "reason": str(exc)}
    return {"success": True, **_balance(holder.purse)}


def _tool_force_save(holder: _PurseHolder) -> dict[str, Any]:
    holder.purse.force_save()
    return {"success": True, **_balance(holder.purse)}


# ── Server factory ──────────────────────────────────────────────────


def create_server(purse: CurrencyPurse, name: str = "purse") -> FastMCP:
    """Create an MCP server exposing *purse*."""
    holder = _PurseHolder(purse=purse, name=name)

    mcp = FastMCP(name=f"idlepurse: {name}")

    @mcp.tool()
    def get_balance() -> dict[str, Any]:
        """Get the current balance: amount, level, display string, base-unit total, pending save ticks."""
        return _tool_get_balance(holder)

    @mcp.tool()
    def add(value: float, level: str = "") -> dict[str, Any]:
        """Add VALUE at LEVEL (one of '', K, M, B, T, Q, QQ) to the purse."""
        return _tool_add(holder, value, level)

    @mcp.tool()
    def subtract(value: float, level: str = "") -> dict[str, Any]:
        """Subtract VALUE at LEVEL from the purse. Fails if funds are insufficient."""
        return _tool_subtract(holder, value, level)

    @mcp.tool()
    def force_save() -> dict[str, Any]:
        """Persist the purse immediately, ignoring the save tick counter."""
        return _tool_force_save(holder)

    return mcp
