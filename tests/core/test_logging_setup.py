"""Tests for library logging: engine context, formatters and setup."""

import json
import logging
import sys

import pytest
from mpmath import mpf

from bigcomplex import Complex
from bigcomplex import functions as fn
from bigcomplex import real as engine
from bigcomplex.core.config import settings
from bigcomplex.core.errors import InvalidNumericLiteral
from bigcomplex.core.logging import (
    EngineLoggerAdapter,
    StructuredFormatter,
    TextFormatter,
    get_context_logger,
    render_value,
    setup_logging,
)
from bigcomplex.core.precision import working_precision


def capture_pow_record(caplog):
    with caplog.at_level(logging.DEBUG, logger="bigcomplex.functions"):
        fn.pow(Complex(0, 2), 3)
    return caplog.records[-1]


class TestRenderValue:
    """Test how context values are rendered."""

    def test_engine_real(self):
        assert render_value(mpf("2.5")) == "2.5"

    def test_complex(self):
        assert render_value(Complex(3, -4)) == "3 - 4i"

    def test_plain_values_pass_through(self):
        assert render_value(3) == 3
        assert render_value("abc") == "abc"
        assert render_value(None) is None


class TestEngineContext:
    """Test that library records carry precision and operands."""

    def test_pow_record_context(self, caplog):
        record = capture_pow_record(caplog)
        assert record.extra_data["precision"] == 20
        assert record.extra_data["base"] == Complex(0, 2)
        assert record.extra_data["exponent"] == 3

    def test_precision_follows_working_precision(self, caplog):
        with working_precision(30):
            with caplog.at_level(logging.DEBUG, logger="bigcomplex.functions"):
                fn.acoth(0)
        assert caplog.records[-1].extra_data == {"precision": 30, "input": Complex(0, 0)}

    def test_parse_failure_context(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="bigcomplex.real"):
            with pytest.raises(InvalidNumericLiteral):
                engine.to_real(object())
        assert caplog.records[-1].extra_data["value"].startswith("<object object")

    def test_permanent_context_is_merged(self):
        adapter = get_context_logger("bigcomplex.test", component="solver")
        assert isinstance(adapter, EngineLoggerAdapter)
        msg, kwargs = adapter.process("hello", {"extra_data": {"residue": 2}})
        assert msg == "hello"
        assert kwargs["extra"]["extra_data"] == {
            "precision": 20,
            "component": "solver",
            "residue": 2,
        }


class TestStructuredFormatter:
    """Test JSON log output."""

    def test_library_record(self, caplog):
        data = json.loads(StructuredFormatter().format(capture_pow_record(caplog)))
        assert data["level"] == "DEBUG"
        assert data["logger"] == "bigcomplex.functions"
        assert data["message"] == "pow: imaginary base to integer power, residue 3"
        assert data["function"] == "pow"
        assert data["context"] == {"precision": 20, "base": "2i", "exponent": "3.0"}
        assert "timestamp" in data

    def test_record_without_context(self):
        record = logging.LogRecord("bigcomplex", logging.INFO, __file__, 1, "plain", (), None)
        data = json.loads(StructuredFormatter().format(record))
        assert "context" not in data

    def test_exception_info(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "bigcomplex", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )
        data = json.loads(StructuredFormatter().format(record))
        assert "ValueError: boom" in data["exception"]


class TestTextFormatter:
    """Test human-readable log output."""

    def test_context_is_appended(self, caplog):
        text = TextFormatter().format(capture_pow_record(caplog))
        assert "bigcomplex.functions - DEBUG - pow: imaginary base" in text
        assert text.endswith("[precision=20 base=2i exponent=3.0]")


class TestSetupLogging:
    """Test configuration of the bigcomplex logger from settings."""

    def test_text_format(self, monkeypatch, restore_library_logger):
        monkeypatch.setattr(settings, "LOG_FORMAT", "text")
        monkeypatch.setattr(settings, "LOG_FILE", None)
        library_logger = setup_logging("debug")
        assert library_logger is restore_library_logger
        assert library_logger.level == logging.DEBUG
        assert library_logger.propagate is False
        assert isinstance(library_logger.handlers[0].formatter, TextFormatter)

    def test_root_logger_untouched(self, monkeypatch, restore_library_logger):
        monkeypatch.setattr(settings, "LOG_FILE", None)
        root_handlers = logging.getLogger().handlers[:]
        setup_logging()
        assert logging.getLogger().handlers == root_handlers

    def test_repeated_setup_replaces_handlers(self, monkeypatch, restore_library_logger):
        monkeypatch.setattr(settings, "LOG_FILE", None)
        setup_logging()
        setup_logging()
        assert len(restore_library_logger.handlers) == 1

    def test_unknown_level_falls_back_to_warning(self, monkeypatch, restore_library_logger):
        monkeypatch.setattr(settings, "LOG_LEVEL", "chatty")
        monkeypatch.setattr(settings, "LOG_FILE", None)
        assert setup_logging().level == logging.WARNING

    def test_json_file_receives_library_records(self, monkeypatch, tmp_path, restore_library_logger):
        log_file = tmp_path / "logs" / "bigcomplex.log"
        monkeypatch.setattr(settings, "LOG_FORMAT", "json")
        monkeypatch.setattr(settings, "LOG_FILE", str(log_file))
        setup_logging("DEBUG")

        fn.pow(Complex(0, 2), 3)
        for handler in restore_library_logger.handlers:
            handler.flush()

        line = log_file.read_text(encoding="utf-8").strip().splitlines()[-1]
        data = json.loads(line)
        assert data["logger"] == "bigcomplex.functions"
        assert data["context"]["base"] == "2i"
