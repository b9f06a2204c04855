"""
Positional ruler printed above bit lines.

One digit line per decimal place of the highest bit index, most significant
place first, then a dashed separator line. Every line is grouped exactly like
the bit lines so the columns stay aligned.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from typing import Iterator

# Local ----------------------------------------------------------------------------------------------------------------
from .groups import GroupSpec, format_groups


# Methods --------------------------------------------------------------------------------------------------------------

def ruler_lines(
        width: int,
        spec: GroupSpec | None = None,
        *,
        origin: int = 0,
        reverse: bool = False,
        color: bool = False,
) -> list[str]:
    """
    Build the ruler header for bit strings of the given width.

    Args:
        width: Resolved bit width, at least 1.
        spec: Group spec shared with the bit lines.
        origin: Index of the first numbered bit.
        reverse: Number from the most significant column instead of the least.
        color: Join groups by color instead of spaces.

    Returns:
        Digit lines, most significant place first, followed by the separator.

    Examples:
        >>> ruler_lines(12)
        [' 1          ', '109876543210', '------------']
    """
    spec = spec or GroupSpec()
    indices = list(_column_indices(width, origin, reverse))
    places = len(str(origin + width - 1))

    lines = []
    for place in reversed(range(places)):
        digits = "".join(_ruler_digit(i, place, origin) for i in indices)
        lines.append(format_groups(digits, spec, color))
    lines.append(format_groups("-" * width, spec, color))
    return lines


# Private methods ------------------------------------------------------------------------------------------------------

def _column_indices(width: int, origin: int, reverse: bool) -> Iterator[int]:
    """Bit index of each column, left to right."""
    if reverse:
        return iter(range(origin, origin + width))
    return reversed(range(origin, origin + width))


def _ruler_digit(index: int, place: int, origin: int) -> str:
    """
    Digit of index at the decimal place, or a blank when it is not shown.

    A place is shown at round boundaries only, except on the first numbered
    column of an origin above 9, which shows all of its own digits.
    """
    unit = 10 ** place
    shown = index % unit == 0 and (index > 0 or place == 0)
    if origin > 9 and index == origin and index >= unit:
        shown = True
    return str(index // unit % 10) if shown else " "
