"""Read-only git access for the prompt status line.

Usage:
    ```python
    from gitprompt.git import PromptRepository

    with PromptRepository.open(".") as repo:
        branch = repo.resolve_branch()
        counts = repo.status_counts()
    ```
"""

from __future__ import annotations

from gitprompt.git.models import (
    BranchRef,
    DetachedHead,
    NamedBranch,
    Report,
    StatusCounts,
    Tracking,
    UnbornBranch,
)
from gitprompt.git.porcelain import FileCounts, parse_porcelain_v2
from gitprompt.git.repository import PromptRepository

__all__ = [
    "BranchRef",
    "DetachedHead",
    "FileCounts",
    "NamedBranch",
    "PromptRepository",
    "Report",
    "StatusCounts",
    "Tracking",
    "UnbornBranch",
    "parse_porcelain_v2",
]
