"""Tests for the exception hierarchy and engine precision helpers."""

import logging

import mpmath
import pytest

from bigcomplex import BigComplexError, Complex, InvalidNumericLiteral
from bigcomplex import functions as fn
from bigcomplex.core import config
from bigcomplex.core.precision import current_precision, setup_precision, working_precision


class TestErrors:
    """Test BigComplexError / InvalidNumericLiteral."""

    def test_base_error(self):
        error = BigComplexError("bad", {"key": "value"})
        assert str(error) == "bad"
        assert error.message == "bad"
        assert error.details == {"key": "value"}

    def test_base_error_default_details(self):
        assert BigComplexError("bad").details == {}

    def test_invalid_literal_hierarchy(self):
        error = InvalidNumericLiteral("abc")
        assert isinstance(error, BigComplexError)
        assert isinstance(error, ValueError)

    def test_invalid_literal_message_and_details(self):
        error = InvalidNumericLiteral("abc", "not a number")
        assert error.message == "Invalid numeric literal: 'abc' (not a number)"
        assert error.details == {"value": "'abc'", "type": "str"}
        assert error.value == "abc"

    def test_invalid_literal_without_reason(self):
        assert str(InvalidNumericLiteral(None)) == "Invalid numeric literal: None"

    def test_parse_failure_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="bigcomplex.real"):
            with pytest.raises(InvalidNumericLiteral):
                Complex("twelve")
        assert "twelve" in caplog.text


class TestPrecision:
    """Test working precision helpers."""

    def test_current_precision(self, engine_precision):
        assert current_precision() == engine_precision

    def test_setup_precision(self):
        assert setup_precision(35) == 35
        assert mpmath.mp.dps == 35

    def test_setup_precision_from_settings(self, monkeypatch):
        monkeypatch.setattr(config.settings, "PRECISION", 25)
        assert setup_precision() == 25

    def test_setup_precision_rejects_zero(self):
        with pytest.raises(ValueError):
            setup_precision(0)

    def test_working_precision_restores(self):
        with working_precision(50) as dps:
            assert dps == 50
            assert current_precision() == 50
        assert current_precision() == 20

    def test_results_follow_precision(self):
        """Test that values computed at higher precision carry more digits."""
        with working_precision(40):
            root = fn.sqrt(2).real
            assert str(Complex(root)) == "1.41421356237309504880168872420969807857"
        assert str(fn.sqrt(2)) == "1.4142135623730950488"
