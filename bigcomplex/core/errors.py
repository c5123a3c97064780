"""
Library exceptions.

Only parse failures are reported as errors. Domain problems such as
division by zero or the logarithm of zero propagate as NaN / Infinity
components instead.
"""

from typing import Any, Dict, Optional


class BigComplexError(Exception):
    """Base exception for bigcomplex errors"""

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidNumericLiteral(BigComplexError, ValueError):
    """Raised when a value cannot be parsed into an engine real"""

    def __init__(self, value: Any, reason: Optional[str] = None):
        message = f"Invalid numeric literal: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(
            message=message,
            details={"value": repr(value), "type": type(value).__name__}
        )
        self.value = value
