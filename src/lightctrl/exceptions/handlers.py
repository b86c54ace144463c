"""
Centralized error handling utilities.

Low-level errors (OSError from the socket layer, pydantic ValidationError
from config loading) are translated here into LightCtrlError subclasses that
carry a user message, a technical message and a recovery hint.

## Quick Reference

| Scenario | Use This |
|----------|----------|
| Socket bind/connect/send failed | `wrap_transport_error(e, "send", address)` |
| Config file fails validation | `wrap_pydantic_error(e, str(path))` |
| Show any error to a user | `format_error_for_display(e)` |
| Critical section with auto-logging | `with ErrorContext("open device"): ...` |

## Architecture

```
CLI            formats user_message / recovery_hint, logs to file
   ^ LightCtrlError
LEDDevice      converts OSError into TransportError, raises SizeMismatchError
   ^ OSError
socket         platform networking stack
```
"""

import logging
from typing import Any, Optional

from .base import LightCtrlError
from .config import ConfigFileInvalidError, ConfigValidationError
from .device import TransportError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("open LED device") as ctx:
            device = connect("10.0.0.5:1234", 60)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self):
        """Enter the context."""
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """
        Exit the context and log any exception.

        Returns:
            True if exception should be suppressed, False otherwise
        """
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, LightCtrlError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)

        return not self.re_raise


def wrap_transport_error(
    error: BaseException,
    operation: str,
    address: Optional[Any] = None,
) -> LightCtrlError:
    """
    Convert a low-level socket error to a TransportError.

    Errors that are already LightCtrlError instances are returned unchanged.

    Args:
        error: The original exception from the socket layer
        operation: What was being attempted ("connect", "send", ...)
        address: The device address involved

    Returns:
        A LightCtrlError suitable for raising with ``from error``
    """
    if isinstance(error, LightCtrlError):
        return error
    return TransportError(operation=operation, original_error=error, address=address)


def wrap_pydantic_error(error: Exception, file_path: str) -> LightCtrlError:
    """
    Convert Pydantic validation errors to lightctrl exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Invalid syntax: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg

        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',)))
            return ConfigValidationError(
                field=field,
                value=first_error.get('input', None),
                error_msg=first_error.get('msg', 'validation failed'),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get('loc', ('unknown',)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")

            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=f"{len(errors)} validation errors:\n" + "\n".join(error_lines),
                file_path=file_path
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path
    )


def format_error_for_display(error: BaseException) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, LightCtrlError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
