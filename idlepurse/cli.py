from __future__ import annotations

import argparse
import sys

from idlepurse.adapter import JsonFileAdapter
from idlepurse.config import PurseConfig, ScalingMode
from idlepurse.errors import PurseError
from idlepurse.formatting import format_purse, parse_amount
from idlepurse.level import Level
from idlepurse.purse import CurrencyPurse

_SCALING_CHOICES = {
    "exponential": ScalingMode.EXPONENTIAL,
    "linear": ScalingMode.LINEAR,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="idlepurse",
        description="idlepurse: inspect and edit a JSON-backed currency purse",
    )
    parser.add_argument(
        "--scaling",
        default="exponential",
        choices=sorted(_SCALING_CHOICES),
        help="Cross-level scaling rule (default: exponential)",
    )
    sub = parser.add_subparsers(dest="command")

    show = sub.add_parser("show", help="Print the current balance")
    show.add_argument("path", help="Purse JSON file")
    show.add_argument(
        "--precision", type=int, default=2, help="Decimal places (default: 2)"
    )

    for name, help_text in (
        ("add", "Add to the balance"),
        ("subtract", "Subtract from the balance"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("path", help="Purse JSON file")
        cmd.add_argument("value", help="Amount, optionally suffixed (e.g. 1.5K)")
        cmd.add_argument(
            "--level",
            default=None,
            help="Level of the amount; overrides any suffix on VALUE",
        )

    return parser


def open_purse(path: str, scaling: str = "exponential") -> CurrencyPurse:
    """Load a purse backed by the JSON file at *path*."""
    config = PurseConfig(save_ticks=1, scaling=_SCALING_CHOICES[scaling])
    return CurrencyPurse(JsonFileAdapter(path), config)


def _resolve_value(value: str, level: str | None) -> tuple[float, Level]:
    amount, parsed_level = parse_amount(value)
    if level is not None:
        parsed_level = Level.parse(level)
    return amount, parsed_level


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    try:
        purse = open_purse(args.path, args.scaling)

        if args.command == "show":
            print(format_purse(purse, args.precision))
            return

        amount, level = _resolve_value(args.value, args.level)
        if args.command == "add":
            purse.add(amount, level)
        else:
            purse.subtract(amount, level)
        print(format_purse(purse))
    except (PurseError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
