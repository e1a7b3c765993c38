import logging
import pytest


@pytest.fixture(autouse=True, scope="session")
def silence_debug_logging():
    """
    Ensure that debug messages do not bias the benchmarks.
    """
    logging.getLogger("fastastream").setLevel(logging.WARNING)
