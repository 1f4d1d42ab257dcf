from __future__ import annotations

from pathlib import Path

from gitprompt.exceptions.base import GitPromptError


class GitError(GitPromptError):
    """Exception for failures while inspecting a git repository.

    Attributes:
        message: Human-readable error message.
        operation: Read operation that failed (e.g., "status", "tracking").
    """

    def __init__(self, message: str, operation: str | None = None) -> None:
        """Initialize the GitError.

        Args:
            message: Human-readable error message.
            operation: Read operation that failed.
        """
        self.operation = operation
        super().__init__(message)


class NotARepositoryError(GitError):
    """Exception raised when a path is not inside any git working tree.

    This is an expected outcome, not a bug: the prompt simply omits the
    git segment.

    Attributes:
        message: Human-readable error message.
        path: Directory that is not inside a repository.
    """

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
    ) -> None:
        """Initialize the NotARepositoryError.

        Args:
            message: Human-readable error message.
            path: Directory that is not inside a repository.
        """
        self.path = path
        super().__init__(message, operation="discover")


class RepositoryReadError(GitError):
    """Exception raised when repository state cannot be read.

    Covers corrupted objects or refs, permission problems and I/O failures.
    Fatal for the invocation and never retried.

    Attributes:
        message: Human-readable error message.
        operation: Read operation that failed.
        path: Repository working tree, when known.
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        path: Path | str | None = None,
    ) -> None:
        """Initialize the RepositoryReadError.

        Args:
            message: Human-readable error message.
            operation: Read operation that failed.
            path: Repository working tree, when known.
        """
        self.path = path
        super().__init__(message, operation=operation)


class GitNotFoundError(RepositoryReadError):
    """Exception raised when the git executable is not installed or not in PATH."""

    def __init__(self, message: str = "Git CLI not found") -> None:
        """Initialize the GitNotFoundError.

        Args:
            message: Human-readable error message.
        """
        super().__init__(message, operation="git_check")
