"""Shared test fixtures for the gitprompt test suite.

Repositories (from tests/fixtures/repos.py)
-------------------------------------------

Functions:
    git: Run a git command in a directory and return stdout.
    commit_file: Write a file, stage it and commit it.

Fixtures:
    git_repo: Repository on branch "main" with one commit (README.md).
    unborn_repo: Freshly initialised repository on "main", no commits.
    repo_with_remote: (local, remote) pair; local "main" tracks "origin/main".
    conflicted_repo: git_repo in the middle of a merge with one conflict.
    non_git_dir: Directory outside any repository.

Example:
    >>> def test_clean(git_repo):
    ...     report = build_report(git_repo)
    ...     assert report.label == "main"
"""

from __future__ import annotations

from tests.fixtures.repos import (
    commit_file,
    conflicted_repo,
    git,
    git_repo,
    non_git_dir,
    repo_with_remote,
    unborn_repo,
)

__all__ = [
    "commit_file",
    "conflicted_repo",
    "git",
    "git_repo",
    "non_git_dir",
    "repo_with_remote",
    "unborn_repo",
]
