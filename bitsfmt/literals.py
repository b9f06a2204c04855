"""
Numeric literal parsing into canonical bit strings.

Supports decimal (signed, range-checked), octal, binary and hexadecimal
notations. Classification is ordered: the first grammar that matches wins,
so ``101`` is decimal, ``0101`` is octal and ``b101`` is binary.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
import re
from dataclasses import dataclass
from enum import StrEnum, unique
from typing import Callable, Iterable

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import BitsConf
from .errors import UnrecognizedFormat, ValueTooLarge, WidthTooSmall

logger = logging.getLogger(__name__)

OCTAL_BITS = {digit: format(int(digit, 8), "03b") for digit in "01234567"}
HEX_BITS = {digit: format(int(digit, 16), "04b") for digit in "0123456789abcdef"}

_FLIP = str.maketrans("01", "10")
_STRIP = str.maketrans("", "", BitsConf.SEPARATORS)


# Classes --------------------------------------------------------------------------------------------------------------

@unique
class LiteralKind(StrEnum):
    """Notation a literal was recognized as, in classification order."""
    DECIMAL = "decimal"
    OCTAL = "octal"
    BINARY = "binary"
    HEX = "hex"


@dataclass(frozen=True)
class ParsedValue:
    """
    A literal decoded into its canonical bit string.

    Attributes:
        text: The literal exactly as given, separators included.
        bits: Bit string, most significant bit first, with no padding beyond
            what the notation itself implies (octal and hex digits expand to
            full 3 and 4 bit patterns).
        negative: True for negative decimals. Their bits are two's complement
            with a leading sign bit, so padding must extend them with 1s.
        kind: Notation the literal was recognized as.
    """
    text: str
    bits: str
    negative: bool = False
    kind: LiteralKind = LiteralKind.DECIMAL

    @property
    def width(self) -> int:
        """Natural width, the number of bits before any padding."""
        return len(self.bits)

    @property
    def fill(self) -> str:
        """Sign extension digit."""
        return "1" if self.negative else "0"

    def padded(self, width: int) -> str:
        """Return bits sign-extended on the most significant side up to width."""
        return pad_bits(self, width)

    def to_int(self) -> int:
        """Integer value of the bits, read as two's complement when negative."""
        if not self.bits:
            return 0
        value = int(self.bits, 2)
        if self.negative:
            value -= 1 << self.width
        return value


# Methods --------------------------------------------------------------------------------------------------------------

def parse_literal(text: str) -> ParsedValue:
    """
    Classify a numeric literal and decode it into bits.

    Separators ``,`` and ``_`` are stripped first. Notations are tried in order:

    - decimal: ``[+-]?[1-9][0-9]*``, range checked, negatives in two's complement
    - octal: optional ``0``, ``0o`` or ``0O`` prefix, digits 0-7
    - binary: optional ``0b``, ``0B``, ``b`` or ``B`` prefix, digits 0-1
    - hexadecimal: optional ``0x`` or ``0X`` prefix, hex digits in any case

    Raises:
        TypeError: If text is not a string.
        UnrecognizedFormat: If no notation matches.
        ValueTooLarge: If a decimal does not fit the native integer range.

    Examples:
        >>> parse_literal("0x2f").bits
        '00101111'
        >>> parse_literal("017").bits
        '001111'
        >>> parse_literal("-2").bits
        '10'
    """
    if not isinstance(text, str):
        raise TypeError(f"literal must be a str, but found {type(text).__name__}")

    cleaned = text.strip().translate(_STRIP)
    for kind, pattern, decode in _NOTATIONS:
        match = pattern.fullmatch(cleaned)
        if match is None:
            continue
        bits, negative = decode(text, match)
        value = ParsedValue(text=text, bits=bits, negative=negative, kind=kind)
        logger.debug("literal %r parsed as %s, %d bits", text, kind, value.width)
        return value

    raise UnrecognizedFormat(f"unrecognized number format: {text!r}", text=text)


def parse_literals(texts: Iterable[str]) -> list[ParsedValue]:
    """Parse every literal, preserving input order. The first failure aborts the batch."""
    return [parse_literal(t) for t in texts]


def pad_bits(value: ParsedValue, width: int) -> str:
    """
    Sign-extend value bits on the most significant side up to width.

    Non-negative values are padded with 0s, negative values with 1s,
    which keeps their two's complement meaning at any width.
    """
    if width < value.width:
        raise WidthTooSmall(
            f"{value.text!r} needs {value.width} bits, more than width {width}", text=value.text
        )
    return value.fill * (width - value.width) + value.bits


# Private methods ------------------------------------------------------------------------------------------------------

def _decode_decimal(text: str, match: re.Match) -> tuple[str, bool]:
    digits = match.group(0)
    value = int(digits)

    # Out of range values are clamped, so they no longer print as their own digits
    native = min(max(value, BitsConf.INT_MIN), BitsConf.UINT_MAX)
    if str(native) != digits.removeprefix("+"):
        raise ValueTooLarge(f"number too large: {text!r}", text=text)

    if value >= 0:
        return format(value, "b"), False

    # Bits of -value-1 inverted, behind an explicit sign bit
    magnitude = format(-value - 1, "b") if value < -1 else ""
    return "1" + magnitude.translate(_FLIP), True


def _decode_octal(text: str, match: re.Match) -> tuple[str, bool]:
    return "".join(OCTAL_BITS[d] for d in match.group(1)), False


def _decode_binary(text: str, match: re.Match) -> tuple[str, bool]:
    return match.group(1), False


def _decode_hex(text: str, match: re.Match) -> tuple[str, bool]:
    return "".join(HEX_BITS[d] for d in match.group(1).lower()), False


_NOTATIONS: tuple[tuple[LiteralKind, re.Pattern, Callable[[str, re.Match], tuple[str, bool]]], ...] = (
    (LiteralKind.DECIMAL, re.compile(r"[+-]?[1-9][0-9]*"), _decode_decimal),
    (LiteralKind.OCTAL, re.compile(r"(?:0[oO]?)?([0-7]+)"), _decode_octal),
    (LiteralKind.BINARY, re.compile(r"(?:0?[bB])?([01]+)"), _decode_binary),
    (LiteralKind.HEX, re.compile(r"(?:0[xX])?([0-9a-fA-F]+)"), _decode_hex),
)
