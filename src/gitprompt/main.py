"""CLI entry point for gitprompt.

This module defines the Click-based command invoked by the shell prompt hook.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from gitprompt import __version__
from gitprompt.cli.context import ExitCode
from gitprompt.cli.output import format_error
from gitprompt.config import load_config
from gitprompt.exceptions import ConfigError, NotARepositoryError, RepositoryReadError
from gitprompt.logging import configure_logging, get_logger
from gitprompt.reporter import OutputFormat, build_report, format_report

logger = get_logger(__name__)

_VERBOSITY_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


@click.command()
@click.version_option(version=__version__, prog_name="gitprompt")
@click.argument(
    "path",
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option(
    "-f",
    "--format",
    "fmt",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.PROMPT.value,
    help="Output format.",
)
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Path to a YAML config file (overrides the user config).",
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Increase log verbosity on stderr (-v for INFO, -vv for DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    default=False,
    help="Log errors only.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    path: Path | None,
    fmt: str,
    config_file: Path | None,
    verbose: int,
    quiet: bool,
) -> None:
    """Print a one-line git status summary for PATH (default: current directory).

    Output: BRANCH [AHEAD BEHIND] STAGED UNSTAGED CONFLICTED UNTRACKED STASH

    BRANCH is '?' for a branch with no commits and ':<sha>' for a detached
    HEAD. AHEAD/BEHIND appear only when an upstream is configured. Exits with
    3 and prints nothing when PATH is not inside a repository.

    Examples:
        gitprompt
        gitprompt ~/src/project --format json
    """
    # Logs go to stderr before anything can emit them
    configure_logging()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        details = []
        if e.field:
            details.append(f"Field: {e.field}")
        if e.value is not None:
            details.append(f"Value: {e.value}")
        click.echo(format_error(e.message, details=details), err=True)
        ctx.exit(ExitCode.FAILURE)

    # Priority: quiet > verbose > config
    if quiet:
        level = logging.ERROR
    elif verbose > 0:
        level = logging.INFO if verbose == 1 else logging.DEBUG
    else:
        level = _VERBOSITY_LEVELS.get(config.verbosity, logging.WARNING)
    configure_logging(level=level)

    try:
        report = build_report(path, config)
    except NotARepositoryError as e:
        logger.debug("not_a_repository", path=str(e.path))
        ctx.exit(ExitCode.NOT_A_REPOSITORY)
    except RepositoryReadError as e:
        logger.debug("status_read_failed", operation=e.operation, error=e.message)
        click.echo(format_error(e.message), err=True)
        ctx.exit(ExitCode.FAILURE)

    click.echo(format_report(report, fmt))


if __name__ == "__main__":
    cli()
