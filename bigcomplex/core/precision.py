"""
Engine precision helpers for embedding applications.

mpmath keeps one process-wide working precision. The value types only read
it; these helpers are the single place that writes it, and only when the
embedding application asks. Changing the precision while another thread is
computing is undefined behaviour owned by the caller.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import mpmath

from .config import settings
from .logging import get_context_logger

logger = get_context_logger(__name__)


def current_precision() -> int:
    """Return the engine's working precision in decimal digits."""
    return mpmath.mp.dps


def setup_precision(dps: Optional[int] = None) -> int:
    """
    Set the engine's global working precision.

    Args:
        dps: Decimal digits (None = settings.PRECISION)

    Returns:
        The precision now in effect
    """
    if dps is None:
        dps = settings.PRECISION
    if dps < 1:
        raise ValueError(f"Precision must be at least 1 digit, got {dps}")

    mpmath.mp.dps = dps
    logger.debug("Engine precision set to %d digits", dps)
    return mpmath.mp.dps


@contextmanager
def working_precision(dps: int) -> Iterator[int]:
    """Temporarily run with `dps` decimal digits, restoring the previous setting."""
    with mpmath.workdps(dps):
        yield mpmath.mp.dps
