"""
Custom exception hierarchy for colorcomp.

## Exception Hierarchy

```
ColorCompError (base)
├── InvalidHexCodeError
│   ├── MalformedLengthError
│   └── MalformedDigitsError
└── ChannelValueError
```

All custom exceptions inherit from `ColorCompError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recoverable`: False for errors that end the run, such as a malformed hex code
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Malformed Hex Code

```python
from colorcomp.exceptions import InvalidHexCodeError
from colorcomp.models import Color

try:
    Color.from_hex("FF573")
except InvalidHexCodeError as e:
    print(e.user_message)   # Invalid hex code 'FF573': expected 6 characters, got 5
    print(e.recovery_hint)
```

Both `MalformedLengthError` and `MalformedDigitsError` are reported to users as
the same "invalid hex code" condition; the subclass only refines the message.
"""

from .base import ColorCompError
from .color import (
    ChannelValueError,
    InvalidHexCodeError,
    MalformedDigitsError,
    MalformedLengthError,
)
from .handlers import ErrorContext, format_error_for_display, wrap_pydantic_error

__all__ = [
    # Base
    "ColorCompError",
    # Color
    "ChannelValueError",
    "InvalidHexCodeError",
    "MalformedDigitsError",
    "MalformedLengthError",
    # Handlers
    "ErrorContext",
    "format_error_for_display",
    "wrap_pydantic_error",
]
