"""Root of the whitescreen exception tree.

Every error carries two messages: a short one for the person at the
screen and a detailed one for the log file. Errors the user can fix
themselves are marked ``recoverable`` and usually come with a hint.
"""

from typing import Optional


class WhitescreenError(Exception):
    """
    Base class for errors raised by whitescreen.

    Attributes:
        user_message: Shown in the CLI (and by ``str(error)``)
        technical_message: Written to the log; falls back to ``user_message``
        recoverable: True when a corrected input would succeed
        recovery_hint: What to try next, if anything
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

    def get_full_message(self) -> str:
        """User message followed by the hint, for one-shot display."""
        if not self.recovery_hint:
            return self.user_message
        return f"{self.user_message}\n\nSuggestion: {self.recovery_hint}"
