"""
Custom exception hierarchy for lightctrl.

## Exception Hierarchy

```
LightCtrlError (base)
├── LEDError
│   ├── TransportError
│   └── SizeMismatchError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

## Usage

### Example: Wrong number of colors

```python
from lightctrl import Color, connect
from lightctrl.exceptions import SizeMismatchError

leds = connect("192.168.1.50:1234", 4)
try:
    leds.update([Color(1.0, 0.0, 0.0)])
except SizeMismatchError as e:
    print(e.expected, e.received)  # 4 1
```

### Example: Network failure

```python
from lightctrl.exceptions import TransportError

try:
    leds.update(frame)
except TransportError as e:
    logger.warning(f"Frame dropped: {e.original_error}")
```

Both LED failure kinds are raised synchronously from the failing call and are
never retried internally.
"""

from .base import LightCtrlError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .device import LEDError, SizeMismatchError, TransportError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    wrap_pydantic_error,
    wrap_transport_error,
)

__all__ = [
    # Base
    "LightCtrlError",
    # Device
    "LEDError",
    "SizeMismatchError",
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
