"""
Tolerance handling for approximate comparison of engine reals.

Exact equality is the default everywhere; these helpers exist for callers
(mostly tests) that compare transcendental results carrying rounding error.
"""

from __future__ import annotations

from mpmath import mpf


class ToleranceMode:
    """Modes for fuzzy comparison."""

    ABSOLUTE = "absolute"  # |a - b| < tol
    RELATIVE = "relative"  # |a - b| / max(|a|, |b|) < tol


def fuzzy_compare(a: mpf, b: mpf, tolerance: mpf, mode: str = ToleranceMode.ABSOLUTE) -> bool:
    """
    Compare two reals with tolerance.

    Args:
        a: First value
        b: Second value
        tolerance: Tolerance value
        mode: Comparison mode (absolute, relative)

    Returns:
        True if values are equal within tolerance. NaN is never close to
        anything; equal infinities compare equal.
    """
    # Exact equality
    if a == b:
        return True

    diff = abs(a - b)

    if mode == ToleranceMode.ABSOLUTE:
        return diff < tolerance

    elif mode == ToleranceMode.RELATIVE:
        max_abs = max(abs(a), abs(b))
        if max_abs == 0:
            return diff < tolerance
        return diff / max_abs < tolerance

    else:
        raise ValueError(f"Unknown tolerance mode: {mode}")
