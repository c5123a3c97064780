"""Core utilities package"""

from .config import settings, get_settings
from .logging import setup_logging, get_context_logger
from .errors import BigComplexError, InvalidNumericLiteral
from .precision import current_precision, setup_precision, working_precision

__all__ = [
    "settings",
    "get_settings",
    "setup_logging",
    "get_context_logger",
    "BigComplexError",
    "InvalidNumericLiteral",
    "current_precision",
    "setup_precision",
    "working_precision",
]
