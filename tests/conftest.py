"""Pytest configuration for the ziggurat test suite."""

import pytest

from ziggurat.sources import SequenceSource

MASK64 = (1 << 64) - 1


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-statistical",
        action="store_true",
        default=False,
        help="Run full size statistical fit tests (skipped by default, several minutes)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "statistical: mark test as a full size statistical test (skipped unless --run-statistical is passed)",
    )
    config.addinivalue_line(
        "markers",
        "slow: mark test as slow (large sample sizes, may take several seconds)",
    )
    config.addinivalue_line(
        "markers",
        "rng_validation: mark test as an RNG validation test",
    )


def pytest_collection_modifyitems(config, items):
    """Skip statistical tests unless --run-statistical is passed."""
    if config.getoption("--run-statistical"):
        return
    skip_statistical = pytest.mark.skip(reason="need --run-statistical option to run")
    for item in items:
        if "statistical" in item.keywords:
            item.add_marker(skip_statistical)


@pytest.fixture
def scripted():
    """Build a SequenceSource from a list of draws."""

    def _make(*values):
        return SequenceSource(values)

    return _make
