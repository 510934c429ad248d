"""CLI module for blockmerge.

The CLI layer stays thin: Typer commands parse arguments and hand off to the
business logic in `blockmerge.commands.*` through `run_cli_command`, which
turns return values and exceptions into exit codes.

Structure:
- `main.py`: the Typer app, the global callback (verbosity, --version) and
  subcommand registration.
- `apply.py`, `preview.py`: one Typer command each.
- `options.py`: options shared by several commands.
- `utils.py`: logging setup and error handling.
"""
