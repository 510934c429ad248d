import typer
from hotlog import get_logger, verbosity_option

from blockmerge.cli.apply import apply
from blockmerge.cli.preview import preview
from blockmerge.cli.utils import setup_logging
from blockmerge.version import __version__

logger = get_logger(__name__)

app = typer.Typer()

# Module-level constants for Typer options to avoid B008
VERSION_OPTION = typer.Option(
    default=False,
    help='Show version and exit',
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    *,
    verbose: int = verbosity_option,
    version: bool = VERSION_OPTION,
) -> None:
    """Blockmerge - Merge comment-templated blocks across source files."""
    if version:
        typer.echo(__version__)
        raise typer.Exit(0)

    # Always set up logging before the subcommand runs
    setup_logging(verbose)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


app.command()(apply)
app.command()(preview)
