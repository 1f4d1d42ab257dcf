from __future__ import annotations


class GitPromptError(Exception):
    """Base exception class for all gitprompt errors.

    Catch this at the CLI boundary to turn any gitprompt failure into an
    exit code while letting system exceptions propagate naturally.

    Attributes:
        message: Human-readable error message describing what went wrong.
    """

    def __init__(self, message: str) -> None:
        """Initialize the GitPromptError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
