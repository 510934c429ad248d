"""Rewriting of the generated region of each target block.

Only the lines between a `@block_default`/`@block` directive and its
`@endblock` are ever touched. For `@block_default` the template comment lines
at the top of that span are kept, so a file keeps showing its own default
template after it has been overridden.
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from hotlog import get_logger

from blockmerge.directives.recognizer import COMMENT_LINE_PATTERN, is_comment
from blockmerge.directives.scanner import BlockOccurrence, BlockRole, FileRecord
from blockmerge.engine.registry import BlockRegistry
from blockmerge.engine.resolver import resolve_block

logger = get_logger(__name__)

LEADING_WHITESPACE_PATTERN = re.compile(r'^(\s*)')
LINE_END_PATTERN = re.compile(r'\r?\n\Z')


@dataclass(frozen=True)
class Unchanged:
    """The file needs no rewrite."""

    path: str


@dataclass(frozen=True)
class Rewritten:
    """The file must be replaced by `text`."""

    path: str
    text: str


PatchOutcome = Unchanged | Rewritten


@dataclass(frozen=True)
class LineEdit:
    """Replace the half-open line range [start, end) with `lines`."""

    start: int
    end: int
    lines: tuple[str, ...]


def apply_edits(lines: Sequence[str], edits: Sequence[LineEdit]) -> list[str]:
    """Apply non-overlapping edits, highest start first, and return new lines."""
    result = list(lines)
    for edit in sorted(edits, key=lambda e: e.start, reverse=True):
        result[edit.start : edit.end] = edit.lines
    return result


def _reterminate(lines: list[str], newline: str) -> list[str]:
    """Give every line but the last a terminator; the last one keeps none.

    Edits that reach the end of the file move the unterminated last line,
    so terminators are restored around the edited region.
    """
    result = [line if LINE_END_PATTERN.search(line) else f'{line}{newline}' for line in lines[:-1]]
    if lines:
        result.append(LINE_END_PATTERN.sub('', lines[-1]))
    return result


def existing_indent(lines: Sequence[str]) -> str:
    """Leading whitespace of the first non-blank, non-comment line, or ''."""
    for line in lines:
        if line.strip() and not is_comment(line):
            match = LEADING_WHITESPACE_PATTERN.match(line)
            return match.group(1) if match else ''
    return ''


def preserved_template_lines(lines: Sequence[str], prefix: str) -> list[str]:
    """Return the leading template comment lines of a `@block_default` span.

    A line is kept while it is a comment with text that is not a directive
    and whose comment prefix is at least as wide as the directive's.
    """
    kept: list[str] = []
    for line in lines:
        match = COMMENT_LINE_PATTERN.match(line)
        if match is None or not is_comment(line):
            break
        indent, comment_spaces, text = match.groups()
        width = len(indent) + len('//') + len(comment_spaces)
        stripped = text.strip()
        if width < len(prefix) or not stripped or stripped.startswith('@'):
            break
        kept.append(line)
    return kept


def plan_edit(
    record: FileRecord,
    occurrence: BlockOccurrence,
    registry: BlockRegistry,
) -> LineEdit:
    """Build the edit that instantiates one target block in its file."""
    start = occurrence.start_line + 1
    end = min(occurrence.end_line, len(record.lines))
    span = record.lines[start:end]

    indent = existing_indent(span)
    newline = record.line_ending(occurrence.start_line)
    rendered = [f'{line.render(indent)}{newline}' for line in resolve_block(registry, occurrence.block_id)]

    if occurrence.role is BlockRole.DEFAULT:
        preserved = preserved_template_lines(span, occurrence.prefix)
    elif occurrence.role is BlockRole.EMPTY:
        preserved = []
    else:
        msg = f'{occurrence.role.value} blocks are not rewrite targets'
        raise ValueError(msg)

    # preserved lines keep their own terminators
    kept = record.terminated_lines[start : start + len(preserved)]
    return LineEdit(start=start, end=end, lines=(*kept, *rendered))


def patch_file(record: FileRecord, registry: BlockRegistry) -> PatchOutcome:
    """Rewrite every target block of a scanned file.

    Args:
        record: The file as scanned during the first pass.
        registry: The registry filled by scanning every file.

    Returns:
        `Rewritten` with the new text when any block changed, otherwise
        `Unchanged`.
    """
    edits = [plan_edit(record, occ, registry) for occ in record.targets]
    if not edits:
        return Unchanged(record.path)

    original = record.terminated_lines
    new_lines = _reterminate(apply_edits(original, edits), record.newline)
    if new_lines == original:
        logger.debug('file_unchanged', path=record.path, blocks=len(edits))
        return Unchanged(record.path)

    logger.debug('file_patched', path=record.path, blocks=len(edits))
    return Rewritten(record.path, ''.join(new_lines))
