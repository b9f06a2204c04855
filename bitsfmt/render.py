"""
Rendering of parsed literals into display lines.

``render()`` is the whole batch transform: parse every literal, resolve one
shared width, then build the optional ruler and one line per value. Nothing
is returned unless every step succeeds.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
from dataclasses import dataclass
from typing import Iterable

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import InvalidNumberFrom
from .groups import GroupSpec, format_groups
from .highlight import highlight
from .literals import ParsedValue, pad_bits, parse_literals
from .ruler import ruler_lines
from .width import resolve_width

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------

@dataclass(frozen=True)
class BitsOptions:
    """
    Display options threaded through every rendering step.

    Attributes:
        width: Explicit bit width, None to pick one from the width ladder.
        group: Group spec, an int, a spec string like ":6:3:5", or None.
            Normalized to a GroupSpec on construction.
        color: Show groups by alternating colors instead of spaces.
        number: Print the bit position ruler above the values.
        number_from: Index of the first numbered bit; setting it implies number.
        reverse: Number bits from the most significant end.
        highlight_on: Emphasize set bits.
        highlight_off: Emphasize clear bits.
        labels: Prefix value lines with their literal. None labels only
            when more than one value is rendered.
    """
    width: int | None = None
    group: GroupSpec | int | str | None = None
    color: bool = False
    number: bool = False
    number_from: int | None = None
    reverse: bool = False
    highlight_on: bool = False
    highlight_off: bool = False
    labels: bool | None = None

    def __post_init__(self):
        if self.width is not None and (isinstance(self.width, bool) or not isinstance(self.width, int)):
            raise TypeError(f"width must be an int or None, but found {type(self.width).__name__}")
        if self.number_from is not None:
            if isinstance(self.number_from, bool) or not isinstance(self.number_from, int):
                raise TypeError(f"number_from must be an int or None, but found {type(self.number_from).__name__}")
            if self.number_from < 0:
                raise InvalidNumberFrom(
                    f"bit numbering must start at 0 or above, got {self.number_from}", text=str(self.number_from)
                )
        object.__setattr__(self, "group", GroupSpec.parse(self.group))

    @property
    def numbered(self) -> bool:
        return self.number or self.number_from is not None

    @property
    def origin(self) -> int:
        return self.number_from or 0


# Methods --------------------------------------------------------------------------------------------------------------

def render(literals: Iterable[str], options: BitsOptions | None = None) -> list[str]:
    """
    Render literals as grouped bit lines, preceded by the ruler when numbering.

    Raises:
        BitsError: Any parsing, width or grouping error. No lines are returned then.

    Examples:
        >>> render(["0xc0ded"], BitsOptions(width=24, group=":6:3:5"))
        ['0000110000 001101 111 01101']
        >>> render(["-1"], BitsOptions(width=8))
        ['11111111']
    """
    options = options or BitsOptions()
    values = parse_literals(literals)
    if not values:
        return []

    width = resolve_width(values, options.width)
    labelled = options.labels if options.labels is not None else len(values) > 1
    label_width = max(len(v.text) for v in values) if labelled else None

    lines = []
    if options.numbered:
        ruler = ruler_lines(width, options.group, origin=options.origin, reverse=options.reverse,
                            color=options.color)
        lines.extend(_label("", label_width) + line for line in ruler)
    for value in values:
        lines.append(_label(value.text, label_width) + render_value(value, width, options))

    logger.debug("rendered %d values at width %d", len(values), width)
    return lines


def render_value(value: ParsedValue, width: int, options: BitsOptions) -> str:
    """Pad one value to width, group it, then apply the requested highlights."""
    line = format_groups(pad_bits(value, width), options.group, options.color)
    if options.highlight_on:
        line = highlight(line, "1")
    if options.highlight_off:
        line = highlight(line, "0")
    return line


# Private methods ------------------------------------------------------------------------------------------------------

def _label(text: str, label_width: int | None) -> str:
    if label_width is None:
        return ""
    return f"{text:>{label_width}} "
