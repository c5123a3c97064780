"""
Logging for the bigcomplex value layer.

Library modules log through get_context_logger(). Every record carries the
engine precision in effect when it was emitted, plus whatever operands the
caller passes as ``extra_data``; both formatters render engine values at that
precision. Nothing is configured until the embedding application calls
setup_logging(), which only touches the ``bigcomplex`` logger.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import mpmath

from .config import settings

LIBRARY_LOGGER = "bigcomplex"


def render_value(value: Any) -> Any:
    """JSON-friendly form of a context value; engine reals become decimal strings."""
    if isinstance(value, (mpmath.mpf, mpmath.mpc)):
        return mpmath.nstr(value, mpmath.mp.dps)
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    # Complex and anything else render through str()
    return str(value)


def _context(record: logging.LogRecord) -> Dict[str, Any]:
    extra_data = getattr(record, "extra_data", None) or {}
    return {key: render_value(value) for key, value in extra_data.items()}


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, engine context under "context"."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "function": record.funcName,
        }

        context = _context(record)
        if context:
            log_data["context"] = context

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class TextFormatter(logging.Formatter):
    """Human-readable line with the engine context appended as key=value pairs."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = _context(record)
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in context.items())
            line = f"{line} [{pairs}]"
        return line


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach handlers to the ``bigcomplex`` logger from settings.

    Calling it again replaces the handlers it installed before. Records stop
    propagating to the root logger so they are not printed twice.

    Args:
        level: Level name overriding settings.LOG_LEVEL

    Returns:
        The configured library logger
    """
    level_name = (level or settings.LOG_LEVEL).upper()
    log_level = getattr(logging, level_name, logging.WARNING)

    if settings.LOG_FORMAT == "json":
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = TextFormatter()

    handlers = [logging.StreamHandler(sys.stdout)]
    if settings.LOG_FILE:
        log_path = Path(settings.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    library_logger = logging.getLogger(LIBRARY_LOGGER)
    for handler in library_logger.handlers[:]:
        library_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        library_logger.addHandler(handler)

    library_logger.setLevel(log_level)
    library_logger.propagate = False
    return library_logger


class EngineLoggerAdapter(logging.LoggerAdapter):
    """Adds the working precision and permanent context to every record."""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra_data = kwargs.pop("extra_data", {})
        kwargs.setdefault("extra", {})["extra_data"] = {
            "precision": mpmath.mp.dps,
            **self.extra,
            **extra_data,
        }
        return msg, kwargs


def get_context_logger(name: str, **context) -> EngineLoggerAdapter:
    """Logger for a library module, with optional permanent context."""
    return EngineLoggerAdapter(logging.getLogger(name), context)
