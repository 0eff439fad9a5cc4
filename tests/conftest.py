#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from textfmt.integers import IntegerFormatter
from textfmt.strings import StringFormatter


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def bytewise_formatter() -> IntegerFormatter:
    """Shared bytewise formatter with a caller-supplied min_digits that bytewise must not overwrite."""
    return IntegerFormatter(is_bytewise=True, min_digits=3)


@pytest.fixture
def field5() -> StringFormatter:
    """Right-aligned, space-filled field of width 5."""
    return StringFormatter(width=5)
