"""Two-pass merge over an ordered set of source files.

Pass 1 scans every source and fills a single BlockRegistry. Pass 2 patches
every source against that registry. A replace or append in one file may
target a block declared in another, so pass 2 never starts before pass 1 has
seen every file.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from hotlog import get_logger

from blockmerge.directives.scanner import FileRecord, scan_file
from blockmerge.engine.patcher import PatchOutcome, Rewritten, patch_file
from blockmerge.engine.registry import BlockRegistry

logger = get_logger(__name__)


@dataclass(frozen=True)
class SourceFile:
    """A file handed to the engine: an identifier and its full text."""

    path: str
    text: str


@dataclass(frozen=True)
class ScanResult:
    registry: BlockRegistry
    records: list[FileRecord]


def scan_sources(
    sources: Sequence[SourceFile],
    *,
    strict_endblock: bool = False,
) -> ScanResult:
    """Run the scan pass over every source, in the given order."""
    registry = BlockRegistry()
    records = [
        scan_file(
            source.path,
            source.text,
            registry,
            strict_endblock=strict_endblock,
        )
        for source in sources
    ]
    logger.debug(
        'scan_completed',
        files=len(records),
        blocks=len(registry),
    )
    registry.log_summary()
    return ScanResult(registry=registry, records=records)


def patch_records(
    records: Sequence[FileRecord],
    registry: BlockRegistry,
) -> list[PatchOutcome]:
    """Run the patch pass, one outcome per record in the same order."""
    return [patch_file(record, registry) for record in records]


def merge_sources(
    sources: Sequence[SourceFile],
    *,
    strict_endblock: bool = False,
) -> list[PatchOutcome]:
    """Resolve every block across `sources` and patch each source.

    Args:
        sources: Files in discovery order. The order decides which replace
            wins and the order appends are concatenated in.
        strict_endblock: Treat a missing `@endblock` as an error.

    Returns:
        One `Unchanged` or `Rewritten` per source, in input order.

    Raises:
        MalformedDirectiveError: A block directive is malformed. Nothing is
            patched in that case.
        UnterminatedBlockError: `strict_endblock` is set and a block is not
            closed.
    """
    scan = scan_sources(sources, strict_endblock=strict_endblock)
    outcomes = patch_records(scan.records, scan.registry)
    logger.info(
        'merge_completed',
        files=len(outcomes),
        rewritten=sum(isinstance(outcome, Rewritten) for outcome in outcomes),
        _display_level=1,
    )
    return outcomes
