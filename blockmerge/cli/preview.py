from pathlib import Path

import typer

from blockmerge.cli.options import CONFIG_OPTION, PATTERNS_ARG
from blockmerge.cli.utils import run_cli_command
from blockmerge.commands.preview import command

BLOCK_OPTION = typer.Option(
    None,
    '--block',
    help='Only show the block with this identifier',
)


def preview(
    patterns: list[str] | None = PATTERNS_ARG,
    config: Path | None = CONFIG_OPTION,
    block: str | None = BLOCK_OPTION,
) -> None:
    """Show how every block resolves, without writing anything."""
    run_cli_command(lambda: command(config, list(patterns or []), block=block))
