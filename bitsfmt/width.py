"""
Output width selection shared by every value and the ruler.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import logging
from typing import Iterable

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import BitsConf
from .errors import WidthTooSmall
from .literals import ParsedValue

logger = logging.getLogger(__name__)


# Methods --------------------------------------------------------------------------------------------------------------

def resolve_width(
        values: Iterable[ParsedValue],
        width: int | None = None,
        *,
        ladder: Iterable[int] = BitsConf.WIDTH_LADDER,
) -> int:
    """
    Pick the bit width used to display all values.

    An explicit width is used verbatim, but must hold every value. Otherwise
    the smallest ladder entry holding the widest value is chosen; when the
    ladder is exhausted the widest value's own width is used.

    Raises:
        WidthTooSmall: If an explicit width is narrower than some value.

    Examples:
        >>> resolve_width([parse_literal("255")])
        8
        >>> resolve_width([parse_literal("0x1ff")])
        16
        >>> resolve_width([parse_literal("3")], width=5)
        5
    """
    values = list(values)
    widest = max((v.width for v in values), default=0)

    if width is not None:
        if width < 1:
            raise WidthTooSmall(f"width must be at least 1, got {width}", text=str(width))
        for v in values:
            if v.width > width:
                raise WidthTooSmall(
                    f"{v.text!r} needs {v.width} bits, more than width {width}", text=v.text
                )
        return width

    for step in sorted(ladder):
        if step >= widest:
            logger.debug("width resolved to %d from ladder, widest value has %d bits", step, widest)
            return step

    logger.debug("width ladder exhausted, using widest value width %d", widest)
    return widest
