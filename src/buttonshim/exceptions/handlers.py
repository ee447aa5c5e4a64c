"""
Centralized error handling utilities.

Errors travel up three layers, each translating into something more useful
for the next:

```
┌─────────────────────────────────────┐
│  USER LAYER (CLI)                   │
│  - Formats error.user_message       │
│  - Shows error.recovery_hint        │
└─────────────────────────────────────┘
                  ↑ ButtonShimError
┌─────────────────────────────────────┐
│  DRIVER LAYER (BusHandle, config)   │
│  - Catches OSError / ValidationError│
│  - Converts to ButtonShimError      │
└─────────────────────────────────────┘
                  ↑ OSError, ValidationError
┌─────────────────────────────────────┐
│  LOW LEVEL (smbus2, pydantic, I/O)  │
└─────────────────────────────────────┘
```

## Examples

### Converting smbus2 errors

```python
try:
    value = transport.read_byte_data(register)
except OSError as e:
    raise wrap_transport_error(e, "read", register) from e
```

### Critical sections

```python
with ErrorContext("configure button shim", logger_instance=logger):
    bus.write_register(REG_CONFIG, 0b00011111)
```
"""

import errno
import logging
from typing import Optional

from .base import ButtonShimError
from .config import ConfigFileInvalidError, ConfigValidationError
from .transport import TransportError

logger = logging.getLogger(__name__)

_ERRNO_HINTS = {
    getattr(errno, "EREMOTEIO", 121): "The device did not acknowledge (NACK). Is the Button SHIM connected?",
    errno.ENXIO: "No device answered at this address.",
    errno.ETIMEDOUT: "The bus transaction timed out.",
    errno.EAGAIN: "The bus was busy (arbitration lost). The next transaction may succeed.",
}


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("configure button shim") as ctx:
            shim.configure()

        if ctx.error:
            print(f"Failed: {ctx.error}")
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
        """Log any exception; suppress it only when re_raise is False."""
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, ButtonShimError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)

        return not self.re_raise


def wrap_transport_error(
    error: Exception, operation: str, register: Optional[int] = None
) -> TransportError:
    """
    Convert a low-level I2C error into a TransportError.

    smbus2 reports failures as OSError carrying the kernel errno; the
    errno is mapped to a more specific recovery hint where one is known.

    Args:
        error: The original exception from smbus2 / the OS
        operation: The bus operation that failed
        register: Target register address, if known

    Returns:
        TransportError describing the failure
    """
    if isinstance(error, TransportError):
        return error

    hint = None
    if isinstance(error, OSError) and error.errno in _ERRNO_HINTS:
        hint = _ERRNO_HINTS[error.errno]

    if hint:
        return TransportError(operation, register, str(error), recovery_hint=hint)
    return TransportError(operation, register, str(error))


def wrap_pydantic_error(error: Exception, file_path: str) -> ButtonShimError:
    """
    Convert Pydantic validation errors to buttonshim exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
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
            field = ".".join(str(loc) for loc in first_error.get("loc", ("unknown",)))
            return ConfigValidationError(
                field=field,
                value=first_error.get("input"),
                error_msg=first_error.get("msg", "validation failed"),
                file_path=file_path
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get("loc", ("unknown",)))
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


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, ButtonShimError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
