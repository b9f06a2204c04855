"""
Numbers as human-readable bit strings: parsing, grouping, rulers and highlights.
"""

__version__ = "0.1.0"

from .errors import (
    BitsError,
    ExcessBits,
    InsufficientBits,
    InvalidGroupSize,
    InvalidNumberFrom,
    MultipleVariableGroups,
    UnrecognizedFormat,
    ValueTooLarge,
    WidthTooSmall,
)
from .groups import GroupSpec, format_groups, group_bits, join_groups
from .highlight import highlight
from .literals import LiteralKind, ParsedValue, pad_bits, parse_literal, parse_literals
from .render import BitsOptions, render, render_value
from .ruler import ruler_lines
from .width import resolve_width
