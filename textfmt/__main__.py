"""
Command line interface for textfmt formatters.

Usage:
    python -m textfmt int 1234 --radix 2 --min-digits 12
    python -m textfmt int 15 --radix 16 --prefix --bytewise
    python -m textfmt pad 23 --width 7 --align center --fill -
    python -m textfmt optional --style descriptive
    python -m textfmt plural 2 ZERO ONE MANY
    python -m textfmt number 123.456 --max-fraction-digits 2
"""

import argparse
import logging
import sys

from .integers import IntegerFormatter
from .numbers import FractionFormatter, fmt_number
from .optionals import OptionalFormatter, OptionalStyle
from .phrases import plural
from .strings import Alignment, StringFormatter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Format values from the command line", prog="python -m textfmt"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging on stderr")

    subparsers = parser.add_subparsers(dest="command", help="Available formatters")

    # Integer formatter
    int_parser = subparsers.add_parser("int", help="Format an integer in a radix")
    int_parser.add_argument("value", type=lambda s: int(s, 0), help="Integer, Python literal syntax (15, 0xF, -0b11)")
    int_parser.add_argument("--radix", "-r", type=int, default=10, help="Numeral base 2..36 (default: 10)")
    int_parser.add_argument("--prefix", action="store_true", help="Add the radix prefix (0b, 0o, 0x)")
    int_parser.add_argument("--sign", action="store_true", help="Show '+' for non-negative decimal values")
    int_parser.add_argument("--bytewise", action="store_true", help="Pad to one byte worth of digits")
    int_parser.add_argument("--min-digits", type=int, default=0, help="Minimum digit count (default: 0)")
    int_parser.add_argument("--lower", action="store_true", help="Lowercase letter digits")

    # String padding
    pad_parser = subparsers.add_parser("pad", help="Pad text to a minimum width")
    pad_parser.add_argument("text", help="Text to pad")
    pad_parser.add_argument("--width", "-w", type=int, default=0, help="Minimum width (default: 0)")
    pad_parser.add_argument("--align", "-a", choices=[a.value for a in Alignment], default=Alignment.RIGHT.value,
                            help="Alignment (default: right)")
    pad_parser.add_argument("--fill", "-f", default=" ", help="Padding character (default: space)")

    # Optional value
    opt_parser = subparsers.add_parser("optional", help="Present an optional value")
    opt_parser.add_argument("value", nargs="?", default=None, help="Value; omit for the absent case")
    opt_parser.add_argument("--style", "-s", choices=[s.value for s in OptionalStyle],
                            default=OptionalStyle.STRIPPED.value, help="Style (default: stripped)")
    opt_parser.add_argument("--absent", default="nil", help="Text for the absent case (default: nil)")

    # Plural selector
    plural_parser = subparsers.add_parser("plural", help="Pick a word by count")
    plural_parser.add_argument("count", type=int, help="Count")
    plural_parser.add_argument("zero", help="Word for 0")
    plural_parser.add_argument("one", help="Word for 1")
    plural_parser.add_argument("many", help="Word for any other count")

    # Number formatter
    number_parser = subparsers.add_parser("number", help="Format a number with bounded fraction digits")
    number_parser.add_argument("value", type=float, help="Number")
    number_parser.add_argument("--max-fraction-digits", type=int, default=1, help="Default: 1")
    number_parser.add_argument("--min-fraction-digits", type=int, default=0, help="Default: 0")
    number_parser.add_argument("--grouping", action="store_true", help="Use ',' thousands separators")

    return parser


def run(args: argparse.Namespace) -> str:
    """Format according to parsed arguments and return the result."""
    if args.command == "int":
        formatter = IntegerFormatter(radix=args.radix,
                                     uses_prefix=args.prefix,
                                     explicit_positive_sign=args.sign,
                                     is_bytewise=args.bytewise,
                                     min_digits=args.min_digits,
                                     uppercase=not args.lower)
        return formatter.format(args.value)
    elif args.command == "pad":
        return StringFormatter(alignment=args.align, padding_character=args.fill, width=args.width).format(args.text)
    elif args.command == "optional":
        return OptionalFormatter(style=args.style, absent_text=args.absent).format(args.value)
    elif args.command == "plural":
        return plural(args.count, args.zero, args.one, args.many)
    elif args.command == "number":
        formatter = FractionFormatter(max_fraction_digits=args.max_fraction_digits,
                                      min_fraction_digits=args.min_fraction_digits,
                                      grouping=args.grouping)
        return fmt_number(args.value, formatter)
    raise ValueError(f"unknown command {args.command!r}")


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        result = run(args)
    except (TypeError, ValueError) as exc:
        logger.debug("invalid configuration for %s: %s", args.command, exc)
        parser.error(str(exc))

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
