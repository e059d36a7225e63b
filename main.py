#!/usr/bin/env python3
"""
NumWordify — Entry Point
========================

Converts amounts to words from the command line, or prints a demo table.

Usage:
    python main.py                              # Demo table, every bundled locale
    python main.py 1234.56                      # en-US (or $NUMWORDIFY_DEFAULT_LOCALE)
    python main.py 1234.56 -5.5 --locale tr-TR
    python main.py 42 --no-currency
    python main.py --list                       # Available locales
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from numwordify.converter import NumberToWordsConverter
from numwordify.exceptions import NumWordifyError
from numwordify.locales import available_locales, default_locale

load_dotenv()


DEMO_AMOUNTS = ["0", "1", "11", "100", "1000", "1234.56", "11234", "1000000", "-5.50"]


# ─── ANSI Color Constants ───────────────────────────────────────────

_RED = "\033[91m"
_CYAN = "\033[96m"
_DIM = "\033[2m"
_BOLD = "\033[1m"
_RESET = "\033[0m"
_WIDTH = 72


# ─── Pretty Printer ─────────────────────────────────────────────────


def print_demo(locales: list[str], search_path: list[str] | None = None) -> None:
    """Print every demo amount in every locale."""
    for locale in locales:
        converter = NumberToWordsConverter.from_locale(locale, search_path)
        print(f"\n{'=' * _WIDTH}")
        print(f"{_BOLD}{_CYAN}  {locale}{_RESET}")
        print(f"{'─' * _WIDTH}")
        for amount in DEMO_AMOUNTS:
            print(f"  {_DIM}{amount:>10}{_RESET}  {converter.convert(amount)}")
    print(f"{'=' * _WIDTH}\n")


def print_error(error: NumWordifyError) -> None:
    print(f"{_RED}{_BOLD}[{error.code}]{_RESET} {error.message}", file=sys.stderr)
    for k, v in error.details.items():
        print(f"  {_DIM}{k}: {v}{_RESET}", file=sys.stderr)


# ─── Main ────────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Convert amounts to words.")
    parser.add_argument("amounts", nargs="*", help="Amounts to convert, e.g. 1234.56")
    parser.add_argument("--locale", "-l", help="Culture code (default: $NUMWORDIFY_DEFAULT_LOCALE or en-US)")
    parser.add_argument(
        "--no-currency", action="store_true", help="Use the plain number template"
    )
    parser.add_argument(
        "--locales-dir", action="append", default=None, help="Extra locale directory (repeatable)"
    )
    parser.add_argument("--list", action="store_true", help="List available locales and exit")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose > 1 else logging.INFO if args.verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        if args.list:
            for locale in available_locales(args.locales_dir):
                print(locale)
            return 0

        if not args.amounts:
            locales = [args.locale] if args.locale else available_locales(args.locales_dir)
            print_demo(locales, args.locales_dir)
            return 0

        converter = NumberToWordsConverter.from_locale(
            args.locale or default_locale(), args.locales_dir
        )
        for amount in args.amounts:
            if args.no_currency:
                print(converter.convert_without_currency(amount))
            else:
                print(converter.convert(amount))
    except NumWordifyError as e:
        print_error(e)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
