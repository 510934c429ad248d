from pathlib import Path

from hotlog import get_logger

from blockmerge.config import load_config
from blockmerge.display import rich_print_blocks
from blockmerge.engine import scan_sources
from blockmerge.files import discover_files, read_sources

logger = get_logger(__name__)


def command(
    config_path: Path | None,
    patterns: list[str],
    *,
    block: str | None,
) -> int:
    """Scan the matching files and print every block's resolved content.

    Nothing is written.

    Returns:
        0 on success, 1 when `block` names a block that was not found.
    """
    config = load_config(config_path, patterns)
    paths = discover_files(config.patterns, config.exclude)
    if not paths:
        logger.warning('no_files_found', patterns=config.patterns)
        return 0

    sources = read_sources(paths, config.encoding)
    scan = scan_sources(sources, strict_endblock=config.strict_endblock)

    if block is not None and block not in scan.registry:
        logger.error('block_not_found', block=block, files=len(paths))
        return 1

    printed = rich_print_blocks(scan.registry, block)
    logger.info('preview_complete', files=len(paths), blocks=printed, _display_level=1)
    return 0
