"""
Emphasis of set or clear bits in already rendered bit lines.

Rendered lines may carry color escape sequences from grouping, or markers
from an earlier highlight pass. Those sequences pass through untouched and
their digits never count as bits.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
from enum import Enum, auto
from typing import Iterator

# Local ----------------------------------------------------------------------------------------------------------------
from .conf import BitsConf

# One token: a whole CSI escape sequence, or one plain character
_TOKEN = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|.", re.DOTALL)


# Classes --------------------------------------------------------------------------------------------------------------

class _State(Enum):
    NORMAL = auto()
    IN_RUN = auto()


# Methods --------------------------------------------------------------------------------------------------------------

def highlight(text: str, target: str, start: str | None = None, end: str | None = None) -> str:
    """
    Wrap every maximal run of the target bit with start and end markers.

    Escape sequences close an open run and are copied as is, so a run never
    spans a color change.

    Args:
        text: Rendered bit line, plain or color grouped.
        target: The bit to emphasize, "1" or "0".
        start, end: Markers, defaulting to BitsConf.HIGHLIGHT[target].

    Examples:
        >>> highlight("0110 1000", "1", "[", "]")
        '0[11]0 [1]000'
    """
    if target not in BitsConf.HIGHLIGHT:
        raise ValueError(f"target must be '0' or '1', got {target!r}")
    default_start, default_end = BitsConf.HIGHLIGHT[target]
    start = default_start if start is None else start
    end = default_end if end is None else end

    out = []
    state = _State.NORMAL
    for token in _tokens(text):
        if token == target:
            if state is _State.NORMAL:
                out.append(start)
                state = _State.IN_RUN
        elif state is _State.IN_RUN:
            out.append(end)
            state = _State.NORMAL
        out.append(token)

    if state is _State.IN_RUN:
        out.append(end)
    return "".join(out)


# Private methods ------------------------------------------------------------------------------------------------------

def _tokens(text: str) -> Iterator[str]:
    for match in _TOKEN.finditer(text):
        yield match.group(0)
