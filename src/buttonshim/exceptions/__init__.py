"""
Custom exception hierarchy for buttonshim.

## Exception Hierarchy

```
ButtonShimError (base)
├── TransportError
│   └── BusOpenError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `ButtonShimError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: Whether the error can be recovered from
- `recovery_hint`: Optional suggestion for how to fix the issue

`TransportError` is the only error the driver core propagates: every bus
operation (sampling a button, writing an LED frame) can raise it, and
there is no hidden retry loop.

### Example: Failed sample

```python
from buttonshim.exceptions import TransportError

try:
    shim.buttons.update()
except TransportError as e:
    logger.warning(e.technical_message)
```

See `buttonshim.exceptions.handlers` for utilities to convert low-level
errors into these types.
"""

from .base import ButtonShimError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    wrap_pydantic_error,
    wrap_transport_error,
)
from .transport import BusOpenError, TransportError

__all__ = [
    # Base
    "ButtonShimError",
    # Transport
    "BusOpenError",
    "TransportError",
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_pydantic_error",
    "wrap_transport_error",
]
