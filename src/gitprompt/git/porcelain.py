"""Parser for ``git status --porcelain=v2 -z`` output.

Record layout (one record per NUL-terminated chunk):

    1 <XY> <sub> <mH> <mI> <mW> <hH> <hI> <path>
    2 <XY> <sub> <mH> <mI> <mW> <hH> <hI> <score> <path> NUL <origPath>
    u <XY> <sub> <m1> <m2> <m3> <mW> <h1> <h2> <h3> <path>
    ? <path>
    ! <path>
    # <header>

``X`` describes the index against HEAD and ``Y`` the working tree against
the index; ``.`` means unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "PorcelainFormatError",
    "FileCounts",
    "parse_porcelain_v2",
]

_UNCHANGED = "."


class PorcelainFormatError(ValueError):
    """Raised when status output does not follow the porcelain v2 layout."""


@dataclass(frozen=True, slots=True)
class FileCounts:
    """Counts derived from a single status listing.

    Attributes:
        staged: Entries with an index-side change.
        unstaged: Entries with a worktree-side change.
        conflicted: Unmerged entries.
        untracked: Untracked entries.
    """

    staged: int = 0
    unstaged: int = 0
    conflicted: int = 0
    untracked: int = 0


def _change_columns(record: str) -> tuple[str, str]:
    fields = record.split(" ", 2)
    if len(fields) < 3 or len(fields[1]) != 2:
        raise PorcelainFormatError(f"Malformed status record: {record!r}")
    xy = fields[1]
    return xy[0], xy[1]


def parse_porcelain_v2(output: str) -> FileCounts:
    """Reduce porcelain v2 status output to per-category counts.

    Unmerged entries are only ever counted as conflicted. For ordinary and
    renamed entries the index and worktree columns are independent, so a
    path changed on both sides counts once as staged and once as unstaged.

    Args:
        output: Raw stdout of ``git status --porcelain=v2 -z``.

    Returns:
        FileCounts for the listing.

    Raises:
        PorcelainFormatError: If a record has an unknown type or bad layout.
    """
    staged = unstaged = conflicted = untracked = 0

    records = iter(output.split("\0"))
    for record in records:
        if not record:
            continue

        kind = record[0]
        if kind == "#" or kind == "!":
            continue
        if kind == "?":
            untracked += 1
        elif kind == "u":
            _change_columns(record)
            conflicted += 1
        elif kind in ("1", "2"):
            index_col, worktree_col = _change_columns(record)
            if index_col != _UNCHANGED:
                staged += 1
            if worktree_col != _UNCHANGED:
                unstaged += 1
            if kind == "2":
                # Rename and copy records carry the original path separately
                if next(records, None) is None:
                    raise PorcelainFormatError(
                        f"Rename record without original path: {record!r}"
                    )
        else:
            raise PorcelainFormatError(f"Unknown status record: {record!r}")

    return FileCounts(
        staged=staged,
        unstaged=unstaged,
        conflicted=conflicted,
        untracked=untracked,
    )
