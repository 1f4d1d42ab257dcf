"""gitprompt exception hierarchy.

All exceptions can be imported from this package:
    from gitprompt.exceptions import NotARepositoryError, RepositoryReadError
"""

from __future__ import annotations

# Base exception
from gitprompt.exceptions.base import GitPromptError

# Configuration exceptions
from gitprompt.exceptions.config import ConfigError

# Git-related exceptions
from gitprompt.exceptions.git import (
    GitError,
    GitNotFoundError,
    NotARepositoryError,
    RepositoryReadError,
)

__all__ = [
    "ConfigError",
    "GitError",
    "GitNotFoundError",
    "GitPromptError",
    "NotARepositoryError",
    "RepositoryReadError",
]
