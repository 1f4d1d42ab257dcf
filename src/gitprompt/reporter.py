"""Build and render the prompt status report.

``build_report`` performs the whole read: open the repository, resolve HEAD,
compare with the upstream, and count changes. The report is all-or-nothing:
any read failure propagates and nothing partial is returned.

``format_report`` renders the single prompt line consumed by the shell hook:

    <label> [<ahead> <behind>] <staged> <unstaged> <conflicted> <untracked> <stash>

The ahead/behind pair is present only when the branch has an upstream, so a
line has 8 fields with tracking and 6 without.
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

from gitprompt.config import GitPromptConfig
from gitprompt.git import PromptRepository, Report
from gitprompt.logging import get_logger

__all__ = [
    "OutputFormat",
    "build_report",
    "format_report",
]

logger = get_logger(__name__)


class OutputFormat(str, Enum):
    """Output formats for the status line."""

    PROMPT = "prompt"
    JSON = "json"


def build_report(
    path: Path | str | None = None,
    config: GitPromptConfig | None = None,
) -> Report:
    """Read the repository enclosing ``path`` into a Report.

    Args:
        path: Starting directory. Defaults to the current directory.
        config: Settings; defaults are used when None.

    Returns:
        Report for the repository.

    Raises:
        NotARepositoryError: If no repository encloses the path.
        RepositoryReadError: If any part of the repository state is unreadable.
    """
    config = config or GitPromptConfig()

    with PromptRepository.open(path) as repo:
        branch = repo.resolve_branch(short_sha_length=config.short_sha_length)
        tracking = repo.tracking(branch)
        counts = repo.status_counts(
            untracked_files=config.untracked_files,
            count_stash=config.count_stash,
        )
        report = Report(branch=branch, tracking=tracking, counts=counts)
        logger.debug("report_built", path=str(repo.path), label=report.label)

    return report


def _prompt_line(report: Report) -> str:
    fields: list[object] = [report.label]
    if report.tracking is not None:
        fields += [report.tracking.ahead, report.tracking.behind]
    counts = report.counts
    fields += [
        counts.staged,
        counts.unstaged,
        counts.conflicted,
        counts.untracked,
        counts.stashed,
    ]
    return " ".join(str(field) for field in fields)


def format_report(
    report: Report, fmt: OutputFormat | str = OutputFormat.PROMPT
) -> str:
    """Render a Report.

    Args:
        report: Report to render.
        fmt: "prompt" for the space-delimited line, "json" for an object.

    Returns:
        The rendered report without a trailing newline.
    """
    if OutputFormat(fmt) is OutputFormat.JSON:
        return json.dumps(report.to_dict(), sort_keys=True)
    return _prompt_line(report)
