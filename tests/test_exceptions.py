"""Tests for the exception hierarchy and error handlers."""

import logging

import pytest
from pydantic import BaseModel, ValidationError

from lightctrl.exceptions import (
    ConfigFileInvalidError,
    ConfigurationError,
    ConfigValidationError,
    ErrorContext,
    LEDError,
    LightCtrlError,
    SizeMismatchError,
    TransportError,
    format_error_for_display,
    wrap_pydantic_error,
    wrap_transport_error,
)


class _Limits(BaseModel):
    led_count: int
    fps: float


@pytest.mark.unit
class TestHierarchy:
    """Test exception types and attributes."""

    def test_device_errors_share_base(self):
        """Test both LED failure kinds derive from LEDError."""
        assert issubclass(TransportError, LEDError)
        assert issubclass(SizeMismatchError, LEDError)
        assert issubclass(LEDError, LightCtrlError)
        assert issubclass(ConfigurationError, LightCtrlError)

    def test_kinds_are_distinct(self):
        """Test callers can tell the two kinds apart."""
        assert not issubclass(SizeMismatchError, TransportError)
        assert not issubclass(TransportError, SizeMismatchError)

    def test_size_mismatch_fields(self):
        """Test size mismatch carries both counts."""
        error = SizeMismatchError(expected=60, received=59)

        assert error.expected == 60
        assert error.received == 59
        assert str(error) == "Expected 60 colors but received 59"
        assert "expected=60" in error.technical_message
        assert "60" in error.recovery_hint

    def test_transport_error_fields(self):
        """Test transport error keeps the original error."""
        original = OSError(101, "Network is unreachable")
        error = TransportError("send", original, address="10.0.0.5:1234")

        assert error.original_error is original
        assert error.operation == "send"
        assert error.address == "10.0.0.5:1234"
        assert "10.0.0.5:1234" in error.user_message
        assert "OSError" in error.technical_message
        assert error.recoverable

    def test_full_message_includes_hint(self):
        """Test get_full_message appends the recovery hint."""
        error = LightCtrlError("Broken", recovery_hint="Fix it")
        assert error.get_full_message() == "Broken\n\nSuggestion: Fix it"
        assert LightCtrlError("Broken").get_full_message() == "Broken"


@pytest.mark.unit
class TestHandlers:
    """Test error conversion helpers."""

    def test_wrap_transport_error(self):
        """Test OSError becomes TransportError."""
        original = OSError("boom")
        wrapped = wrap_transport_error(original, "connect", "host:1")

        assert isinstance(wrapped, TransportError)
        assert wrapped.original_error is original

    def test_wrap_transport_error_passthrough(self):
        """Test lightctrl errors are returned unchanged."""
        error = SizeMismatchError(1, 2)
        assert wrap_transport_error(error, "send") is error

    def test_format_custom_error(self):
        """Test custom errors format to message and hint."""
        message, hint = format_error_for_display(SizeMismatchError(3, 2))
        assert message == "Expected 3 colors but received 2"
        assert hint is not None

    def test_format_standard_error(self):
        """Test standard errors include the type name."""
        assert format_error_for_display(ValueError("bad")) == ("ValueError: bad", None)

    def test_wrap_pydantic_single_error(self):
        """Test one validation error maps to its field."""
        with pytest.raises(ValidationError) as exc_info:
            _Limits.model_validate({"led_count": "many", "fps": 30})

        error = wrap_pydantic_error(exc_info.value, "/tmp/config.json")
        assert isinstance(error, ConfigValidationError)
        assert error.field == "led_count"
        assert "/tmp/config.json" in error.recovery_hint

    def test_wrap_pydantic_multiple_errors(self):
        """Test several validation errors are combined."""
        with pytest.raises(ValidationError) as exc_info:
            _Limits.model_validate({})

        error = wrap_pydantic_error(exc_info.value, "config.json")
        assert isinstance(error, ConfigValidationError)
        assert error.field == "multiple fields"
        assert "2 validation errors" in error.user_message

    def test_wrap_pydantic_invalid_json(self):
        """Test invalid JSON maps to ConfigFileInvalidError."""
        with pytest.raises(ValidationError) as exc_info:
            _Limits.model_validate_json('{"led_count": 1,}')

        error = wrap_pydantic_error(exc_info.value, "config.json")
        assert isinstance(error, ConfigFileInvalidError)


@pytest.mark.unit
class TestErrorContext:
    """Test ErrorContext logging."""

    def test_reraises_and_logs(self, caplog):
        """Test failures are logged and re-raised."""
        logger = logging.getLogger("test.error_context")

        with caplog.at_level(logging.ERROR, logger="test.error_context"):
            with pytest.raises(SizeMismatchError):
                with ErrorContext("update strip", logger_instance=logger):
                    raise SizeMismatchError(2, 1)

        assert "Failed to update strip" in caplog.text
        assert "expected=2" in caplog.text

    def test_suppresses_when_requested(self):
        """Test errors can be captured instead of raised."""
        with ErrorContext("update strip", re_raise=False) as ctx:
            raise TransportError("send", OSError("down"))

        assert isinstance(ctx.error, TransportError)
