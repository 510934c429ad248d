"""File discovery and text I/O around the merge engine."""

import glob
from collections.abc import Iterable, Sequence
from pathlib import Path

from hotlog import get_logger

from blockmerge.engine import PatchOutcome, Rewritten, SourceFile
from blockmerge.exceptions import FileAccessError

logger = get_logger(__name__)


def _expand(pattern: str, root: Path) -> list[Path]:
    full = pattern if Path(pattern).is_absolute() else str(root / pattern)
    matches = [Path(p) for p in glob.glob(full, recursive=True)]
    return sorted(p.resolve() for p in matches if p.is_file())


def discover_files(
    patterns: Sequence[str],
    exclude: Sequence[str] = (),
    root: Path | None = None,
) -> list[Path]:
    """Expand glob patterns into an ordered, duplicate-free list of files.

    Matches of each pattern are sorted; earlier patterns come first. The
    resulting order is the discovery order the merge relies on.

    Args:
        patterns: Glob patterns, relative to `root` unless absolute.
        exclude: Glob patterns whose matches are removed.
        root: Base directory for relative patterns (defaults to the cwd).

    Returns:
        Absolute paths of the matching regular files.
    """
    base = root if root is not None else Path.cwd()
    excluded = {p for pattern in exclude for p in _expand(pattern, base)}

    found: list[Path] = []
    seen: set[Path] = set()
    for pattern in patterns:
        matches = _expand(pattern, base)
        logger.debug('pattern_expanded', pattern=pattern, matches=len(matches))
        for path in matches:
            if path in seen or path in excluded:
                continue
            seen.add(path)
            found.append(path)
    return found


def read_sources(paths: Iterable[Path], encoding: str = 'utf-8') -> list[SourceFile]:
    """Read every file into a SourceFile, keeping the given order.

    Raises:
        FileAccessError: A file cannot be read or decoded.
    """
    sources: list[SourceFile] = []
    for path in paths:
        try:
            # newline='' keeps \r\n so the engine can write it back unchanged
            with path.open(encoding=encoding, newline='') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as err:
            msg = f'Cannot read {path}: {err}'
            raise FileAccessError(msg) from err
        sources.append(SourceFile(path=str(path), text=text))
    return sources


def write_outcomes(outcomes: Iterable[PatchOutcome], encoding: str = 'utf-8') -> list[Path]:
    """Write every rewritten file and return the paths written.

    Raises:
        FileAccessError: A file cannot be written.
    """
    written: list[Path] = []
    for outcome in outcomes:
        if not isinstance(outcome, Rewritten):
            continue
        path = Path(outcome.path)
        try:
            with path.open('w', encoding=encoding, newline='') as f:
                f.write(outcome.text)
        except OSError as err:
            msg = f'Cannot write {path}: {err}'
            raise FileAccessError(msg) from err
        logger.info('updated_file', path=str(path))
        written.append(path)
    return written
