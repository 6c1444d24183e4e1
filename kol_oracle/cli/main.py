from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys

from kol_oracle.config import LOG_LEVELS, get_settings, secrets_from_settings
from kol_oracle.domain.encoding import decode_uint256, to_hex
from kol_oracle.domain.errors import ArgumentError, ConfigurationError
from kol_oracle.workers.keyword_check import check as run_check

_OUTPUT_FORMATS = ("hex", "int", "json")


def _positive_float(value: str) -> float:
    parsed = float(value)
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be positive")
    return parsed


def _add_check(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("check", help="Check whether an account's recent posts mention any keyword")
    parser.add_argument("handle", help="Account handle, optionally prefixed with '@'")
    parser.add_argument("keywords", help="Comma-separated keywords, e.g. 'airdrop,launch'")
    parser.add_argument("--timeout", type=_positive_float, default=None, help="Request timeout override in seconds")
    parser.add_argument("--base-url", type=str, default=None, help="Mainline API base URL override")
    parser.add_argument("--format", choices=_OUTPUT_FORMATS, default="hex", help="Output format for the result")


def _add_decode(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser("decode", help="Decode a 0x-prefixed uint256 oracle response")
    parser.add_argument("payload", help="Hex encoded uint256, e.g. 0x00...01")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kol-oracle", description="KOL keyword oracle controller")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (defaults to LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_check(subparsers)
    _add_decode(subparsers)
    return parser


def _check(args: argparse.Namespace) -> int:
    settings = get_settings()
    overrides = {}
    if args.timeout is not None:
        overrides["request_timeout"] = args.timeout
    if args.base_url:
        overrides["mainline_base_url"] = args.base_url.rstrip("/")
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    # Positions 0 and 1 are reserved by the oracle request layout.
    request_args = ["", "", args.handle, args.keywords]
    result = run_check(request_args, secrets_from_settings(settings), settings=settings)

    if args.format == "json":
        print(json.dumps(result.to_dict(), ensure_ascii=False))
    elif args.format == "int":
        print(int(result.found))
    else:
        print(to_hex(result.encoded))
    return 0


def _decode(args: argparse.Namespace) -> int:
    print(decode_uint256(args.payload))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    level = (args.log_level or get_settings().log_level).upper()
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    command = args.command
    try:
        if command == "check":
            return _check(args)
        if command == "decode":
            return _decode(args)
    except (ArgumentError, ConfigurationError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    parser.error(f"Unknown command: {command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
