from pathlib import Path

import typer

from blockmerge.cli.options import CONFIG_OPTION, PATTERNS_ARG
from blockmerge.cli.utils import run_cli_command
from blockmerge.commands.apply import command

CHECK_OPTION = typer.Option(
    default=False,
    help='Report files that would change without writing them (exit code 2)',
)


def apply(
    patterns: list[str] | None = PATTERNS_ARG,
    config: Path | None = CONFIG_OPTION,
    *,
    check: bool = CHECK_OPTION,
) -> None:
    """Merge blocks and rewrite the generated regions of the files."""
    run_cli_command(lambda: command(config, list(patterns or []), check_only=check))
