"""Single-pass scanning of one file for block directives."""

import re
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from hotlog import get_logger

from blockmerge.directives.content import ContentLine, extract_content
from blockmerge.directives.recognizer import (
    DirectiveKind,
    comment_prefix,
    parse_directive,
)
from blockmerge.exceptions import DirectiveError, UnterminatedBlockError

if TYPE_CHECKING:
    from blockmerge.engine.registry import BlockRegistry

logger = get_logger(__name__)

LINE_SPLIT_PATTERN = re.compile(r'(\r?\n)')


class BlockRole(str, Enum):
    """How a block occurrence contributes to its identifier.

    - DEFAULT: `@block_default`, declares default content and is rewritten
    - EMPTY: `@block`, a bare slot that is rewritten
    - REPLACE: `@block_replace`, supersedes the default
    - APPEND: `@block_append`, adds to whatever the base content is
    """

    DEFAULT = 'default'
    EMPTY = 'empty'
    REPLACE = 'replace'
    APPEND = 'append'

    @property
    def is_target(self) -> bool:
        """True for roles whose span gets rewritten with resolved content."""
        return self in (BlockRole.DEFAULT, BlockRole.EMPTY)


_ROLE_BY_KIND = {
    DirectiveKind.BLOCK_DEFAULT: BlockRole.DEFAULT,
    DirectiveKind.BLOCK_EMPTY: BlockRole.EMPTY,
    DirectiveKind.BLOCK_REPLACE: BlockRole.REPLACE,
    DirectiveKind.BLOCK_APPEND: BlockRole.APPEND,
}


@dataclass(frozen=True)
class BlockOccurrence:
    """One block-opening directive found in one file.

    For DEFAULT and EMPTY roles `end_line` is the index of the matching
    `@endblock` (or the line count when the block is unterminated). For
    REPLACE and APPEND it is the index where the body run stopped.
    """

    role: BlockRole
    block_id: str
    path: str
    start_line: int
    end_line: int
    prefix: str
    content: tuple[ContentLine, ...] = ()


@dataclass
class FileRecord:
    """A scanned file: its original lines and the blocks found in it.

    `lines` hold the text without terminators; `endings[i]` is the
    terminator that followed `lines[i]` ('' for the last line).
    """

    path: str
    lines: list[str]
    endings: list[str] = field(default_factory=list)
    occurrences: list[BlockOccurrence] = field(default_factory=list)

    @property
    def targets(self) -> list[BlockOccurrence]:
        return [occ for occ in self.occurrences if occ.role.is_target]

    @property
    def newline(self) -> str:
        """The first terminator used in the file, '\\n' if it has none."""
        return next((ending for ending in self.endings if ending), '\n')

    @property
    def terminated_lines(self) -> list[str]:
        return [f'{line}{ending}' for line, ending in zip(self.lines, self.endings)]

    def line_ending(self, index: int) -> str:
        """Terminator of line `index`, falling back to the file's newline."""
        return self.endings[index] or self.newline


def split_lines(text: str) -> tuple[list[str], list[str]]:
    """Split text into lines and the terminator that followed each one."""
    parts = LINE_SPLIT_PATTERN.split(text)
    return parts[0::2], [*parts[1::2], '']


def _locate(lines: Sequence[str], start: int, line: str | None) -> int:
    """Index of the first line at or after `start` equal to `line`."""
    for index in range(start, len(lines)):
        if lines[index] == line:
            return index
    return max(start - 1, 0)


def _find_endblock(lines: Sequence[str], start: int) -> int:
    index = start
    while index < len(lines):
        if parse_directive(lines[index]).kind is DirectiveKind.END_BLOCK:
            return index
        index += 1
    return index


def scan_file(
    path: str,
    text: str,
    registry: 'BlockRegistry',
    *,
    strict_endblock: bool = False,
) -> FileRecord:
    """Scan one file and register every block occurrence found in it.

    Args:
        path: Identifier of the file, used in records and error messages.
        text: Full text of the file.
        registry: Registry that receives every occurrence, in order.
        strict_endblock: Raise instead of warning when a `@block_default` or
            `@block` directive has no matching `@endblock`.

    Returns:
        The FileRecord holding the original lines and the occurrences.

    Raises:
        MalformedDirectiveError: A block directive has the wrong number of
            arguments.
        UnterminatedBlockError: `strict_endblock` is set and a block is not
            closed.
    """
    lines, endings = split_lines(text)
    record = FileRecord(path=path, lines=lines, endings=endings)

    index = 0
    while index < len(lines):
        line = lines[index]
        try:
            directive = parse_directive(line)
        except DirectiveError as exc:
            raise exc.with_location(path, index + 1, line) from exc

        if not directive.kind.opens_block:
            index += 1
            continue

        role = _ROLE_BY_KIND[directive.kind]
        prefix = comment_prefix(line) or ''
        block_id = directive.block_id or ''

        try:
            if role.is_target:
                end_line = _find_endblock(lines, index + 1)
                content = extract_content(lines, index + 1, prefix).lines if role is BlockRole.DEFAULT else ()
                next_index = end_line + 1
            else:
                run = extract_content(lines, index + 1, prefix)
                content = run.lines
                end_line = next_index = run.next_line
        except DirectiveError as exc:
            offending = _locate(lines, index + 1, exc.line)
            raise exc.with_location(path, offending + 1, lines[offending]) from exc

        if role.is_target and end_line >= len(lines):
            _report_unterminated(path, index, line, block_id, strict=strict_endblock)

        occurrence = BlockOccurrence(
            role=role,
            block_id=block_id,
            path=path,
            start_line=index,
            end_line=end_line,
            prefix=prefix,
            content=content,
        )
        record.occurrences.append(occurrence)
        registry.register(occurrence)
        logger.debug(
            'block_found',
            path=path,
            block=block_id,
            role=role.value,
            line=index + 1,
            content_lines=len(content),
        )
        index = next_index

    return record


def _report_unterminated(
    path: str,
    index: int,
    line: str,
    block_id: str,
    *,
    strict: bool,
) -> None:
    if strict:
        msg = f'Block {block_id!r} has no matching @endblock'
        raise UnterminatedBlockError(msg, path=path, line_number=index + 1, line=line)
    logger.warning(
        'unterminated_block',
        path=path,
        block=block_id,
        line=index + 1,
        detail='block extends to the end of the file',
    )
