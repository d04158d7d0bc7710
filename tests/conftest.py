#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from varbrowse.options import InspectOptions, reset


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def default_options():
    """Restore module-level inspect options around every test."""
    reset()
    yield
    reset()


@pytest.fixture
def text_options() -> InspectOptions:
    """Plain text options with the default indent."""
    return InspectOptions.text()
