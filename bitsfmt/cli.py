"""
Command line interface for bitsfmt.

Usage:
    bitsfmt 0xc0ded -w 24 -g :6:3:5
    bitsfmt -n -g 4 255 -1 0o17
    python -m bitsfmt --help
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import logging
import sys
from typing import Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from . import __version__
from .errors import BitsError
from .render import BitsOptions, render

logger = logging.getLogger(__name__)


# Methods --------------------------------------------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bitsfmt",
        description="Show numbers as grouped, numbered and highlighted bit strings. "
                    "Literals may be decimal (-5, 1_000), octal (017, 0o17), "
                    "binary (b101, 0b101) or hexadecimal (ff, 0xff).",
    )
    parser.add_argument("literals", nargs="+", metavar="LITERAL", help="Numbers to display")
    parser.add_argument("-w", "--width", type=int, help="Bit width (default: 8, 16, 32 or 64 as needed)")
    parser.add_argument(
        "-g", "--group", metavar="SIZE|SPEC",
        help="Group every SIZE bits, or by fields like ':6:3:5' (an empty field takes the rest)",
    )
    parser.add_argument("-c", "--color", action="store_true", help="Separate groups by color instead of spaces")
    parser.add_argument("-n", "--number", action="store_true", help="Print bit numbers above the bits")
    parser.add_argument("-N", "--number-from", type=int, metavar="FROM", help="Number bits starting at FROM")
    parser.add_argument("-r", "--reverse", action="store_true", help="Number bits from the most significant end")
    parser.add_argument("-H", "--highlight-on", action="store_true", help="Highlight set bits")
    parser.add_argument("-L", "--highlight-off", action="store_true", help="Highlight clear bits")
    parser.add_argument(
        "--no-labels", dest="labels", action="store_false", default=None,
        help="Do not prefix lines with their literal when several are given",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log parsing decisions to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point, returns the process exit status."""
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        options = BitsOptions(
            width=args.width,
            group=args.group,
            color=args.color,
            number=args.number,
            number_from=args.number_from,
            reverse=args.reverse,
            highlight_on=args.highlight_on,
            highlight_off=args.highlight_off,
            labels=args.labels,
        )
        lines = render(args.literals, options)
    except BitsError as e:
        logger.debug("%s on %r", e.kind, e.text)
        print(f"{parser.prog}: {e}", file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0
