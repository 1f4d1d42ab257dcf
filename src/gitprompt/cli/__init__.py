"""Command-line support for gitprompt."""

from __future__ import annotations

from gitprompt.cli.context import ExitCode
from gitprompt.cli.output import format_error

__all__ = ["ExitCode", "format_error"]
