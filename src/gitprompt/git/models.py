"""Value objects describing the state reported in the prompt.

The branch reference is a tagged variant: exactly one of ``NamedBranch``,
``DetachedHead`` or ``UnbornBranch``. Each variant knows the label it renders
as, so callers never compare against sentinel strings.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any

__all__ = [
    "BranchRef",
    "DetachedHead",
    "NamedBranch",
    "Report",
    "StatusCounts",
    "Tracking",
    "UNBORN_LABEL",
    "UnbornBranch",
]

#: Label shown for a branch with no commits yet
UNBORN_LABEL = "?"

#: Prefix for detached-head labels; ':' can never appear in a git ref name
DETACHED_PREFIX = ":"


@dataclass(frozen=True, slots=True)
class NamedBranch:
    """HEAD is a symbolic ref to a branch that has at least one commit.

    Attributes:
        name: Short branch name (e.g. "main", "feature/login").
    """

    name: str

    @property
    def label(self) -> str:
        """Branch name as shown in the prompt."""
        return self.name


@dataclass(frozen=True, slots=True)
class DetachedHead:
    """HEAD points directly at a commit.

    Attributes:
        sha: Abbreviated commit id.
    """

    sha: str

    @property
    def label(self) -> str:
        """Abbreviated commit id behind the detached-head prefix."""
        return f"{DETACHED_PREFIX}{self.sha}"


@dataclass(frozen=True, slots=True)
class UnbornBranch:
    """HEAD is a symbolic ref to a branch that has never been committed to.

    Attributes:
        name: Short name of the branch HEAD points at.
    """

    name: str

    @property
    def label(self) -> str:
        """Placeholder shown before the first commit."""
        return UNBORN_LABEL


BranchRef = NamedBranch | DetachedHead | UnbornBranch


def _require_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must be >= 0, got {value}")


@dataclass(frozen=True, slots=True)
class Tracking:
    """Divergence between the local branch tip and its upstream.

    Attributes:
        ahead: Commits reachable from the local tip but not from upstream.
        behind: Commits reachable from upstream but not from the local tip.
        upstream: Short name of the upstream ref (e.g. "origin/main").
    """

    ahead: int
    behind: int
    upstream: str = ""

    def __post_init__(self) -> None:
        _require_non_negative(ahead=self.ahead, behind=self.behind)


@dataclass(frozen=True, slots=True)
class StatusCounts:
    """Per-category change counts for the index and working tree.

    Attributes:
        staged: Paths whose index entry differs from HEAD.
        unstaged: Paths whose working tree file differs from the index.
        conflicted: Paths with unresolved merge conflicts.
        untracked: Paths unknown to git and not ignored.
        stashed: Number of stash entries.
    """

    staged: int = 0
    unstaged: int = 0
    conflicted: int = 0
    untracked: int = 0
    stashed: int = 0

    def __post_init__(self) -> None:
        _require_non_negative(
            staged=self.staged,
            unstaged=self.unstaged,
            conflicted=self.conflicted,
            untracked=self.untracked,
            stashed=self.stashed,
        )


@dataclass(frozen=True, slots=True)
class Report:
    """Everything the prompt shows for one repository.

    Attributes:
        branch: Current branch reference variant.
        tracking: Upstream divergence, or None when there is nothing to compare.
        counts: Change counters.
    """

    branch: BranchRef
    tracking: Tracking | None
    counts: StatusCounts

    def __post_init__(self) -> None:
        if isinstance(self.branch, UnbornBranch) and self.tracking is not None:
            raise ValueError("an unborn branch cannot have tracking information")

    @property
    def label(self) -> str:
        """Prompt label of the branch reference."""
        return self.branch.label

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        if isinstance(self.branch, NamedBranch):
            kind = "branch"
        elif isinstance(self.branch, DetachedHead):
            kind = "detached"
        else:
            kind = "unborn"
        return {
            "label": self.label,
            "head": {"kind": kind, **asdict(self.branch)},
            "tracking": asdict(self.tracking) if self.tracking else None,
            **asdict(self.counts),
        }
