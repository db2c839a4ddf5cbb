"""Pytest configuration for normvar test suite."""

import matplotlib
import pytest

matplotlib.use("Agg")


def pytest_addoption(parser):
    """Add custom command line options."""
    parser.addoption(
        "--run-statistical",
        action="store_true",
        default=False,
        help="Run the full-scale reference experiment (skipped by default, ~minutes)",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "statistical: mark test as a full-scale statistical run (skipped unless --run-statistical is passed)",
    )
    config.addinivalue_line(
        "markers",
        "slow: mark test as slow (large sample sizes, may take several seconds)",
    )
    config.addinivalue_line(
        "markers",
        "rng_validation: mark test as a generator validation test",
    )


def pytest_collection_modifyitems(config, items):
    """Skip statistical tests unless the corresponding flag is passed."""
    run_statistical = config.getoption("--run-statistical")

    skip_statistical = pytest.mark.skip(reason="need --run-statistical option to run")

    for item in items:
        if not run_statistical and "statistical" in item.keywords:
            item.add_marker(skip_statistical)


@pytest.fixture
def small_experiment_config():
    """A harness configuration small enough for unit tests."""
    return {
        "target_sizes": [50, 200],
        "n_trials": 4,
        "seed": 1234,
        "shapiro_max_size": 100,
    }
