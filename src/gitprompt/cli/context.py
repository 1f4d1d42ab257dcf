"""Exit codes for the gitprompt CLI."""

from __future__ import annotations

from enum import IntEnum

__all__ = ["ExitCode"]


class ExitCode(IntEnum):
    """Exit codes understood by the shell prompt hook.

    - 0 when a report was printed, including clean and unborn repositories
    - 1 when the repository or the configuration could not be read
    - 2 for usage errors (reported by click)
    - 3 when the path is not inside a repository, so the hook drops the segment
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE = 2
    NOT_A_REPOSITORY = 3
