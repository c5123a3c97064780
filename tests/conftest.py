"""
Shared pytest fixtures and utilities for testing bigcomplex.

This module provides:
- A fixed engine precision for every test
- Helpers for exact and approximate Complex assertions
- Library logger isolation for logging tests
"""

import logging

import mpmath
import pytest

from bigcomplex import Complex
from bigcomplex import functions as fn


TEST_PRECISION = 20


@pytest.fixture(autouse=True)
def engine_precision():
    """Run every test at 20 decimal digits and restore the previous setting."""
    with mpmath.workdps(TEST_PRECISION):
        yield TEST_PRECISION


@pytest.fixture
def assert_complex_exact():
    """Helper to assert exact componentwise equality."""
    def _assert_exact(actual: Complex, real, imaginary=0) -> None:
        expected = Complex(real, imaginary)
        assert isinstance(actual, Complex), f"Expected Complex, got {type(actual)}"
        assert fn.equals(actual, expected), f"{actual!r} != {expected!r}"

    return _assert_exact


@pytest.fixture
def assert_complex_close():
    """Helper to assert componentwise equality within 1e-6."""
    def _assert_close(actual: Complex, real, imaginary=0, tolerance=None) -> None:
        expected = Complex(real, imaginary)
        assert isinstance(actual, Complex), f"Expected Complex, got {type(actual)}"
        assert fn.approx_equals(actual, expected, tolerance), (
            f"{actual!r} is not close to {expected!r}"
        )

    return _assert_close


@pytest.fixture
def restore_library_logger():
    """Restore the bigcomplex logger after a test runs setup_logging()."""
    library_logger = logging.getLogger("bigcomplex")
    handlers = library_logger.handlers[:]
    level = library_logger.level
    propagate = library_logger.propagate
    yield library_logger
    for handler in library_logger.handlers[:]:
        if handler not in handlers:
            handler.close()
    library_logger.handlers[:] = handlers
    library_logger.setLevel(level)
    library_logger.propagate = propagate


pytestmark = [
    pytest.mark.filterwarnings("ignore::DeprecationWarning"),
]
