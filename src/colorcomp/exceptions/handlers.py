"""
Centralized error handling utilities.

## Quick Reference

| Scenario | Use This | Example |
|----------|----------|---------|
| Hex code wrong length | `MalformedLengthError` | `raise MalformedLengthError("FF573", 5)` |
| Hex pair not base-16 | `MalformedDigitsError` | `raise MalformedDigitsError("GGGGGG", "GG", "red", 0)` |
| Channel outside 0-255 | `ChannelValueError` | `raise ChannelValueError("r", 300)` |

### Handling Patterns

| Pattern | Code |
|---------|------|
| Convert a model validation failure | `raise wrap_pydantic_error(e) from e` |
| Critical section with auto-logging | `with ErrorContext("parse input color"): ...` |
| Show an error to the user | `message, hint = format_error_for_display(e)` |

## Architecture

```
┌─────────────────────────────────────────┐
│  USER LAYER (CLI)                       │
│  - Formats error.user_message           │
│  - Shows error.recovery_hint            │
└─────────────────────────────────────────┘
                  ↑
                  │ ColorCompError
                  │
┌─────────────────────────────────────────┐
│  CORE (Color model, complements)        │
│  - Raises typed parse errors            │
│  - Converts pydantic ValidationError    │
└─────────────────────────────────────────┘
```
"""

import logging
from typing import Optional

from .base import ColorCompError
from .color import ChannelValueError, InvalidHexCodeError, MalformedDigitsError, MalformedLengthError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Log the start, completion and failure of one conversion step.

    Exceptions always propagate. A ColorCompError is logged at DEBUG with its
    technical message, since the CLI reports it to the user itself; anything
    else is unexpected and logged at ERROR with a traceback.

    Example:
        ```python
        with ErrorContext("parse input color"):
            color = Color.from_hex(code)
        ```
    """

    def __init__(self, operation: str, logger_instance: Optional[logging.Logger] = None):
        self.operation = operation
        self.logger = logger_instance or logger

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
        elif isinstance(exc_val, ColorCompError):
            self.logger.debug(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)
        return False


def wrap_pydantic_error(error: Exception) -> ColorCompError:
    """
    Convert a pydantic validation error on a Color into a ChannelValueError.

    Only the first failing field is reported; a Color has at most three.
    """
    from pydantic import ValidationError

    if isinstance(error, ValidationError):
        errors = error.errors()
        if errors:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get("loc", ("unknown",)))
            return ChannelValueError(
                field=field,
                value=first_error.get("input"),
                error_msg=first_error.get("msg"),
            )

    return ChannelValueError(field="unknown", value=None, error_msg=str(error))


def _hex_error_detail(error: InvalidHexCodeError) -> Optional[str]:
    """Point at the offending part of a malformed hex code."""
    if isinstance(error, MalformedDigitsError):
        return f"  {error.code}\n  {' ' * error.position}^^ {error.channel}"
    if isinstance(error, MalformedLengthError):
        payload = error.code.lstrip("#")
        return f"  '{payload}' is {error.length} characters long, need 6"
    return None


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    For hex codes the recovery hint is prefixed with a pointer to the bad
    segment or the offending length.

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, InvalidHexCodeError):
        detail = _hex_error_detail(error)
        hint = error.recovery_hint
        if detail:
            hint = f"{detail}\n\n{hint}" if hint else detail
        return error.user_message, hint

    if isinstance(error, ColorCompError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
