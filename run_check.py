#!/usr/bin/env python3
"""Convenience entry point that forwards to kol_oracle.cli.main."""
from __future__ import annotations

from kol_oracle.cli.main import main as cli_main


def main() -> int:
    return cli_main()


if __name__ == "__main__":
    raise SystemExit(main())
