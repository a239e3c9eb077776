"""Base exception class for colorcomp."""

from typing import Optional


class ColorCompError(Exception):
    """
    Base exception for all colorcomp errors.

    Attributes:
        user_message: Message shown in the CLI error block
        technical_message: Detailed message for logs
        recoverable: False when the run cannot continue past this error
        recovery_hint: Optional hint for how to fix the input
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        return self.user_message
