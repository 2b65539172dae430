"""Global test configuration and fixtures."""

import numpy as np
import pytest
import structlog


@pytest.fixture
def small_sample():
    """Return the four-value sample used in the worked examples."""
    return [1.0, 4.0, 6.0, 19.0]


@pytest.fixture
def unsorted_sample():
    """Return an eight-value sample supplied out of order."""
    return [1.0, 4.0, 8.0, 6.0, 14.0, 3.0, 19.0, 20.0]


@pytest.fixture
def consecutive_list():
    """Return the integers 5 through 10 as floats."""
    return [float(i) for i in range(5, 11)]


@pytest.fixture
def consecutive_set():
    """Return the integers 30 through 39 as a set."""
    return {float(i) for i in range(30, 40)}


@pytest.fixture
def random_sample():
    """Return a reproducible pseudo-random sample."""
    rng = np.random.default_rng(20171017)
    return rng.normal(loc=10.0, scale=3.0, size=101)


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()
