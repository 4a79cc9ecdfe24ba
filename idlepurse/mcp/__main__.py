"""CLI entry point: python -m idlepurse.mcp <purse.json>"""

from __future__ import annotations

import sys
from pathlib import Path


_USAGE = "Usage: python -m idlepurse.mcp <purse.json> [save_ticks]"


def _parse_save_ticks(raw: str) -> int | None:
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value >= 1 else None


def main() -> None:
    if len(sys.argv) < 2:
        print(_USAGE, file=sys.stderr)
        print("Example: python -m idlepurse.mcp saves/gold.json 10", file=sys.stderr)
        sys.exit(1)

    path = sys.argv[1]
    save_ticks = _parse_save_ticks(sys.argv[2]) if len(sys.argv) > 2 else 1
    if save_ticks is None:
        print(
            f"Error: save_ticks must be a positive integer, got {sys.argv[2]!r}",
            file=sys.stderr,
        )
        print(_USAGE, file=sys.stderr)
        sys.exit(1)

    from idlepurse.adapter import JsonFileAdapter
    from idlepurse.config import PurseConfig
    from idlepurse.mcp.server import create_server
    from idlepurse.purse import CurrencyPurse

    purse = CurrencyPurse(JsonFileAdapter(path), PurseConfig(save_ticks=save_ticks))
    server = create_server(purse, name=Path(path).stem)
    try:
        server.run(transport="stdio")
    finally:
        purse.force_save()


if __name__ == "__main__":
    main()
