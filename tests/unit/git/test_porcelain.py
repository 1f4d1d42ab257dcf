"""Tests for the porcelain v2 status parser."""

from __future__ import annotations

import pytest

from gitprompt.git.porcelain import FileCounts, PorcelainFormatError, parse_porcelain_v2

_HASH = "a" * 40


def _ordinary(xy: str, path: str) -> str:
    return f"1 {xy} N... 100644 100644 100644 {_HASH} {_HASH} {path}"


def _renamed(xy: str, path: str, orig: str) -> str:
    return f"2 {xy} N... 100644 100644 100644 {_HASH} {_HASH} R100 {path}\0{orig}"


def _unmerged(xy: str, path: str) -> str:
    return (
        f"u {xy} N... 100644 100644 100644 100644 {_HASH} {_HASH} {_HASH} {path}"
    )


def _listing(*records: str) -> str:
    return "".join(f"{record}\0" for record in records)


class TestParsePorcelainV2:
    """Tests for parse_porcelain_v2()."""

    def test_empty_output_is_clean(self) -> None:
        assert parse_porcelain_v2("") == FileCounts()

    def test_headers_are_skipped(self) -> None:
        output = _listing("# branch.oid (initial)", "# branch.head main")
        assert parse_porcelain_v2(output) == FileCounts()

    def test_index_only_change_is_staged(self) -> None:
        counts = parse_porcelain_v2(_listing(_ordinary("A.", "new.py")))
        assert counts == FileCounts(staged=1)

    def test_worktree_only_change_is_unstaged(self) -> None:
        counts = parse_porcelain_v2(_listing(_ordinary(".M", "README.md")))
        assert counts == FileCounts(unstaged=1)

    def test_change_on_both_sides_counts_in_both(self) -> None:
        counts = parse_porcelain_v2(_listing(_ordinary("MM", "app.py")))
        assert counts == FileCounts(staged=1, unstaged=1)

    def test_unmerged_entries_are_only_conflicted(self) -> None:
        output = _listing(_unmerged("UU", "a.txt"), _unmerged("AA", "b.txt"))
        assert parse_porcelain_v2(output) == FileCounts(conflicted=2)

    def test_untracked_and_ignored(self) -> None:
        output = _listing("? notes.txt", "? build/", "! dist/")
        assert parse_porcelain_v2(output) == FileCounts(untracked=2)

    def test_rename_consumes_original_path(self) -> None:
        # The original path "? odd" would be miscounted as untracked otherwise
        output = _listing(_renamed("R.", "new name.py", "? odd"), "? other.txt")
        assert parse_porcelain_v2(output) == FileCounts(staged=1, untracked=1)

    def test_paths_with_spaces(self) -> None:
        output = _listing(_ordinary(".M", "dir with space/file name.txt"))
        assert parse_porcelain_v2(output) == FileCounts(unstaged=1)

    def test_mixed_listing(self) -> None:
        output = _listing(
            _ordinary("M.", "staged.py"),
            _ordinary(".D", "deleted.py"),
            _unmerged("UU", "conflict.py"),
            "? untracked.py",
        )
        assert parse_porcelain_v2(output) == FileCounts(
            staged=1, unstaged=1, conflicted=1, untracked=1
        )

    def test_unknown_record_type_raises(self) -> None:
        with pytest.raises(PorcelainFormatError, match="Unknown status record"):
            parse_porcelain_v2(_listing("X something"))

    def test_truncated_record_raises(self) -> None:
        with pytest.raises(PorcelainFormatError, match="Malformed"):
            parse_porcelain_v2(_listing("1 M"))

    def test_rename_without_original_path_raises(self) -> None:
        record = f"2 R. N... 100644 100644 100644 {_HASH} {_HASH} R100 new.py"
        with pytest.raises(PorcelainFormatError, match="original path"):
            parse_porcelain_v2(record)

    def test_format_error_is_value_error(self) -> None:
        assert issubclass(PorcelainFormatError, ValueError)
