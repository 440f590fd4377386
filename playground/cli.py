"""Console entry point: print the square root check for each number."""
from __future__ import annotations

import argparse
from typing import List, Optional

from dotenv import load_dotenv

from .config import AppConfig
from .presenter import check_and_describe


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playground-sqrt",
        description="Check whether numbers in 1..10000 have an integer square root.",
    )
    parser.add_argument("numbers", nargs="*", type=int, help="numbers to check (default: ROOT_CHECK_NUMBER)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    config = AppConfig.from_env()
    args = build_parser().parse_args(argv)

    numbers = args.numbers or [config.default_number]
    for number in numbers:
        if config.debug_log:
            print(f"[Root] checking {number}")
        print(check_and_describe(number))
    return 0


__all__ = ["main", "build_parser"]
