"""Color parsing and construction exceptions.

This module defines exceptions raised while building a Color:
- InvalidHexCodeError: Base class for malformed hex codes
- MalformedLengthError: Hex payload is not exactly 6 characters
- MalformedDigitsError: A channel pair is not valid base-16
- ChannelValueError: A channel value is outside 0-255
"""

from typing import Any, Optional

from .base import ColorCompError

HEX_RECOVERY_HINT = (
    "Use six hexadecimal digits, optionally prefixed with '#'\n"
    "  - Example: --hex FF5733 or --hex '#FF5733'"
)


class InvalidHexCodeError(ColorCompError):
    """Hex code cannot be parsed into a color."""

    def __init__(self, code: str, reason: str):
        """
        Initialize invalid hex code error.

        Args:
            code: The hex code as supplied by the caller
            reason: Why the code was rejected
        """
        super().__init__(
            user_message=f"Invalid hex code '{code}': {reason}",
            technical_message=f"Hex parse failed for {code!r}: {reason}",
            recoverable=False,
            recovery_hint=HEX_RECOVERY_HINT,
        )
        self.code = code
        self.reason = reason


class MalformedLengthError(InvalidHexCodeError):
    """Hex payload (after stripping '#') is not exactly 6 characters."""

    def __init__(self, code: str, length: int):
        super().__init__(code, f"expected 6 characters, got {length}")
        self.length = length


class MalformedDigitsError(InvalidHexCodeError):
    """A 2-character channel segment is not a base-16 number."""

    def __init__(self, code: str, segment: str, channel: str, position: int):
        super().__init__(code, f"{channel} segment '{segment}' is not a hexadecimal number")
        self.segment = segment
        self.channel = channel
        # Index into code, counting any leading '#'
        self.position = position


class ChannelValueError(ColorCompError):
    """RGB channel value is outside the 0-255 range."""

    def __init__(self, field: str, value: Any, error_msg: Optional[str] = None):
        """
        Initialize channel value error.

        Args:
            field: The channel that failed validation ("r", "g" or "b")
            value: The invalid value
            error_msg: Validation message from the model (optional)
        """
        reason = error_msg or "must be between 0 and 255"
        super().__init__(
            user_message=f"Invalid value for channel '{field}': {reason}",
            technical_message=f"Color validation failed for {field}={value!r}: {reason}",
            recoverable=True,
            recovery_hint="RGB channels are integers from 0 to 255",
        )
        self.field = field
        self.value = value
