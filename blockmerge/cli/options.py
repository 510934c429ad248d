import typer

# Module-level constants for Typer options to avoid B008
CONFIG_OPTION = typer.Option(
    None,
    '--config',
    help='Path to the blockmerge YAML configuration file (default: blockmerge.yaml if present)',
)
PATTERNS_ARG = typer.Argument(
    None,
    help='Glob patterns of files to process, added to the configured patterns',
    show_default=False,
)
