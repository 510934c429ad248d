import difflib

from rich.console import Console
from rich.syntax import Syntax

from blockmerge.engine import BlockInfo, BlockRegistry, resolve_block


def unified_diff(path: str, before: str, after: str) -> str:
    """Return a unified diff between the current and the merged text."""
    return ''.join(
        difflib.unified_diff(
            before.splitlines(keepends=True),
            after.splitlines(keepends=True),
            fromfile=path,
            tofile=f'{path} (merged)',
            lineterm='\n',
        ),
    )


def rich_print_diffs(diffs: list[tuple[str, str]]) -> None:
    """Print diffs using rich formatting.

    Args:
        diffs: List of tuples (path, unified_diff)
    """
    console = Console(force_terminal=True)  # Enable colors in CI
    for path, diff in diffs:
        console.rule(f'[bold]{path}')
        syntax = Syntax(diff, 'diff', theme='ansi_dark', word_wrap=False)
        console.print(syntax, soft_wrap=True)


def _describe(info: BlockInfo) -> str:
    parts = []
    if info.default is not None:
        parts.append(f'default in {info.default.path}:{info.default.start_line + 1}')
    if info.replaces:
        last = info.replaces[-1]
        parts.append(f'{len(info.replaces)} replace(s), last in {last.path}:{last.start_line + 1}')
    if info.appends:
        parts.append(f'{len(info.appends)} append(s)')
    parts.append(f'{len(info.targets)} target(s)')
    return ', '.join(parts)


def rich_print_blocks(registry: BlockRegistry, block_id: str | None = None) -> int:
    """Print each block's sources and resolved content.

    Returns:
        The number of blocks printed.
    """
    console = Console()
    printed = 0
    for info in registry:
        if block_id is not None and info.block_id != block_id:
            continue
        console.rule(f'[bold]{info.block_id}')
        console.print(_describe(info), soft_wrap=True, markup=False)
        rendered = '\n'.join(line.render('') for line in resolve_block(registry, info.block_id))
        console.print(rendered, soft_wrap=True, markup=False, highlight=False)
        printed += 1
    return printed
