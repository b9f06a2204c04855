"""
Exceptions raised while parsing literals, resolving widths and grouping bits.

All errors are fatal to a whole invocation. Each one keeps the offending
literal or group spec in ``text`` so front ends can report it verbatim.
"""

# Classes --------------------------------------------------------------------------------------------------------------


class BitsError(ValueError):
    """Base class for all bitsfmt input errors."""

    def __init__(self, message: str, text: str = "") -> None:
        super().__init__(message)
        self.text = text

    @property
    def kind(self) -> str:
        return type(self).__name__


class UnrecognizedFormat(BitsError):
    """Literal matches no decimal, octal, binary or hexadecimal grammar."""


class ValueTooLarge(BitsError):
    """Decimal literal does not survive a round trip through the native integer range."""


class WidthTooSmall(BitsError):
    """Explicit width is narrower than a value's natural width."""


class InvalidGroupSize(BitsError):
    """Group size is non-numeric, negative, or a zero-sized field."""


class MultipleVariableGroups(BitsError):
    """Group spec has more than one empty (variable-length) field."""


class InsufficientBits(BitsError):
    """Fixed group fields need more bits than the bit string holds."""


class ExcessBits(BitsError):
    """Bits remain after every group field has been placed."""


class InvalidNumberFrom(BitsError):
    """Bit numbering origin is negative."""
