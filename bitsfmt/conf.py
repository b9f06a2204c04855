"""
Default constants shared by the bitsfmt parsing and rendering modules.
"""

# Classes --------------------------------------------------------------------------------------------------------------

# @formatter:off

class BitsConf:
    """
    Default configuration constants for bit string parsing and display.

    Attributes:
        WIDTH_LADDER: Standard widths tried, in ascending order, when no explicit
            width is requested. The smallest entry holding every value wins.

        INT_MIN, UINT_MAX: Native decimal range. Decimal literals outside
            [INT_MIN, UINT_MAX] are rejected as too large.

        SEPARATORS: Digit separators stripped from literals before classification.

        GROUP_COLORS: The two colors alternated between groups in color mode,
            the first one applied to the least significant group.

        HIGHLIGHT: Emphasis markers (start, end) keyed by the highlighted bit.

        RESET: Sequence closing a group color.
    """

    WIDTH_LADDER = (8, 16, 32, 64)

    INT_MIN = -2**63
    UINT_MAX = 2**64 - 1

    SEPARATORS = ",_"

    GROUP_COLORS = (
        "\x1b[33m",  # yellow
        "\x1b[36m",  # cyan
    )
    RESET = "\x1b[0m"

    HIGHLIGHT = {
        "1": ("\x1b[1m", "\x1b[22m"),  # bold
        "0": ("\x1b[2m", "\x1b[22m"),  # dim
    }

# @formatter:on
