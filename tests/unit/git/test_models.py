"""Tests for the report value objects."""

from __future__ import annotations

import pytest

from gitprompt.git import (
    DetachedHead,
    NamedBranch,
    Report,
    StatusCounts,
    Tracking,
    UnbornBranch,
)


class TestBranchVariants:
    """Tests for the branch reference variants."""

    def test_named_branch_label_is_name(self) -> None:
        assert NamedBranch(name="feature/login").label == "feature/login"

    def test_detached_label_is_prefixed_sha(self) -> None:
        assert DetachedHead(sha="abc1234").label == ":abc1234"

    def test_unborn_label_is_question_mark(self) -> None:
        assert UnbornBranch(name="main").label == "?"

    def test_branch_named_question_mark_is_not_unborn(self) -> None:
        assert NamedBranch(name="?") != UnbornBranch(name="?")

    def test_variants_are_frozen(self) -> None:
        branch = NamedBranch(name="main")
        with pytest.raises(AttributeError):
            branch.name = "other"  # type: ignore[misc]

    def test_variants_have_slots(self) -> None:
        for cls in (NamedBranch, DetachedHead, UnbornBranch):
            assert hasattr(cls, "__slots__")


class TestCounters:
    """Tests for Tracking and StatusCounts validation."""

    def test_status_counts_default_to_zero(self) -> None:
        counts = StatusCounts()
        assert (
            counts.staged,
            counts.unstaged,
            counts.conflicted,
            counts.untracked,
            counts.stashed,
        ) == (0, 0, 0, 0, 0)

    @pytest.mark.parametrize(
        "field", ["staged", "unstaged", "conflicted", "untracked", "stashed"]
    )
    def test_negative_counts_rejected(self, field: str) -> None:
        with pytest.raises(ValueError, match=field):
            StatusCounts(**{field: -1})

    def test_negative_tracking_rejected(self) -> None:
        with pytest.raises(ValueError, match="behind"):
            Tracking(ahead=0, behind=-1)


class TestReport:
    """Tests for Report."""

    def test_unborn_report_cannot_have_tracking(self) -> None:
        with pytest.raises(ValueError, match="unborn"):
            Report(
                branch=UnbornBranch(name="main"),
                tracking=Tracking(ahead=0, behind=0),
                counts=StatusCounts(),
            )

    def test_label_follows_branch(self) -> None:
        report = Report(
            branch=DetachedHead(sha="deadbee"), tracking=None, counts=StatusCounts()
        )
        assert report.label == ":deadbee"

    def test_to_dict_with_tracking(self) -> None:
        report = Report(
            branch=NamedBranch(name="main"),
            tracking=Tracking(ahead=2, behind=1, upstream="origin/main"),
            counts=StatusCounts(staged=1, untracked=3),
        )
        assert report.to_dict() == {
            "label": "main",
            "head": {"kind": "branch", "name": "main"},
            "tracking": {"ahead": 2, "behind": 1, "upstream": "origin/main"},
            "staged": 1,
            "unstaged": 0,
            "conflicted": 0,
            "untracked": 3,
            "stashed": 0,
        }

    def test_to_dict_without_tracking_uses_none(self) -> None:
        report = Report(
            branch=UnbornBranch(name="main"), tracking=None, counts=StatusCounts()
        )
        data = report.to_dict()
        assert data["tracking"] is None
        assert data["head"] == {"kind": "unborn", "name": "main"}
