"""Command-line utility for resolving and comparing partial temporal values.

Values are passed as JSON field objects, e.g. ``'{"year": 2005, "month": 1}'``,
or ``null`` for a missing value.
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from pydantic import ValidationError

from app.deps import configure_logging, get_settings
from app.schemas.temporal import PartialTemporalModel
from core.temporal.compare import best_resolution, same_or_contained
from core.temporal.partial import InvalidPartialTemporal, PartialTemporal
from core.temporal.resolver import to_earliest_local_datetime, to_utc_instant


class CliInputError(Exception):
    """Raised when a command-line value cannot be turned into a partial temporal value."""


def parse_value(raw: str) -> Optional[PartialTemporal]:
    """Decode one JSON argument into a partial temporal value (None for ``null``)."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CliInputError(f"not valid JSON: {raw!r}") from exc
    if data is None:
        return None
    if not isinstance(data, dict):
        raise CliInputError(f"expected a JSON object or null, got {raw!r}")
    try:
        return PartialTemporalModel(**data).to_partial()
    except (ValidationError, InvalidPartialTemporal) as exc:
        raise CliInputError(str(exc)) from exc


def _dump(value: Optional[PartialTemporal]) -> Optional[dict]:
    if value is None:
        return None
    return PartialTemporalModel.from_partial(value).model_dump(exclude_none=True)


def cmd_resolve(args: argparse.Namespace) -> dict:
    """Round a value down to its earliest instant."""
    value = parse_value(args.value)
    ignore_offset = args.ignore_offset
    if ignore_offset is None:
        ignore_offset = get_settings().ignore_offset_default
    local = to_earliest_local_datetime(value, ignore_offset)
    instant = to_utc_instant(value, ignore_offset)
    return {
        "local": local.isoformat() if local else None,
        "instant": instant.isoformat() if instant else None,
    }


def cmd_best(args: argparse.Namespace) -> dict:
    """Pick the more precise of two non-contradicting values."""
    result = best_resolution(parse_value(args.first), parse_value(args.second))
    return {
        "outcome": result.outcome.value,
        "value": _dump(result.value),
        "conflicting_field": result.conflicting_field,
    }


def cmd_contained(args: argparse.Namespace) -> dict:
    """Check whether two values name the same date or one contains the other."""
    return {"result": same_or_contained(parse_value(args.first), parse_value(args.second))}


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser with subcommands."""
    parser = argparse.ArgumentParser(prog="chronodate")
    sub = parser.add_subparsers(dest="command")

    resolve_p = sub.add_parser("resolve")
    resolve_p.add_argument("value")
    resolve_p.add_argument(
        "--ignore-offset",
        dest="ignore_offset",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Read wall-clock fields as UTC (default from settings)",
    )
    resolve_p.set_defaults(func=cmd_resolve)

    best_p = sub.add_parser("best")
    best_p.add_argument("first")
    best_p.add_argument("second")
    best_p.set_defaults(func=cmd_best)

    contained_p = sub.add_parser("contained")
    contained_p.add_argument("first")
    contained_p.add_argument("second")
    contained_p.set_defaults(func=cmd_contained)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point invoked via `python -m cli.chronodate_cli ...`."""
    configure_logging(get_settings())
    parser = build_parser()
    args = parser.parse_args(argv)
    if not hasattr(args, "func"):
        parser.print_help()
        return 0
    try:
        payload = args.func(args)
    except CliInputError as exc:
        print(f"chronodate: invalid value: {exc}", file=sys.stderr)
        return 2
    print(json.dumps(payload, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
