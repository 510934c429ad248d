from pathlib import Path

from hotlog import get_logger

from blockmerge.config import load_config
from blockmerge.display import rich_print_diffs, unified_diff
from blockmerge.engine import Rewritten, merge_sources
from blockmerge.files import discover_files, read_sources, write_outcomes
from blockmerge.version import __version__

logger = get_logger(__name__)


def command(
    config_path: Path | None,
    patterns: list[str],
    *,
    check_only: bool,
) -> int:
    """Merge blocks across the matching files.

    Returns:
        0 on success, 2 in check mode when at least one file would change.
    """
    # Log the running version early so CI logs always show which blockmerge wrote the output
    logger.info('running_blockmerge', version=__version__, _display_level=1)

    config = load_config(config_path, patterns)
    paths = discover_files(config.patterns, config.exclude)
    if not paths:
        logger.warning('no_files_found', patterns=config.patterns)
        return 0

    logger.info('processing_files', count=len(paths))
    sources = read_sources(paths, config.encoding)
    outcomes = merge_sources(sources, strict_endblock=config.strict_endblock)

    if check_only:
        originals = {source.path: source.text for source in sources}
        diffs = [
            (outcome.path, unified_diff(outcome.path, originals[outcome.path], outcome.text))
            for outcome in outcomes
            if isinstance(outcome, Rewritten)
        ]
        if diffs:
            logger.error(
                'check_results',
                files=[path for path, _ in diffs],
                suggestion='run `blockmerge apply` to apply changes',
            )
            rich_print_diffs(diffs)
        return 2 if diffs else 0

    written = write_outcomes(outcomes, config.encoding)
    logger.info('processing_complete', files=len(paths), updated=len(written))
    return 0
