#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from bitsfmt.conf import BitsConf


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def colors() -> tuple[str, str, str]:
    """Group colors, least significant group first, and the reset sequence."""
    c0, c1 = BitsConf.GROUP_COLORS
    return c0, c1, BitsConf.RESET


@pytest.fixture
def emphasis() -> dict[str, tuple[str, str]]:
    """Highlight markers keyed by the highlighted bit."""
    return dict(BitsConf.HIGHLIGHT)
