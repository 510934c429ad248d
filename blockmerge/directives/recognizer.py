"""Directive recognition for `//` comment lines.

A directive is a comment line of the form ``// @command [args...]``. Only the
four block-opening commands and ``@endblock`` mean anything to the merge
engine; any other ``@word`` is recognized but ignored so new commands can be
introduced without breaking older files.
"""

import re
from dataclasses import dataclass
from enum import Enum

from blockmerge.exceptions import MalformedDirectiveError

# Whole trimmed line: `//`, optional spaces, `@word`, optional arguments.
DIRECTIVE_PATTERN = re.compile(r'^//\s*(@[A-Za-z0-9_]+(?:\s+.+)?)\s*$')

# Leading whitespace, the comment marker and the spaces that follow it.
COMMENT_PREFIX_PATTERN = re.compile(r'^(\s*)//(\s*)')

# Same as above but also captures the comment text.
COMMENT_LINE_PATTERN = re.compile(r'^(\s*)//(\s*)(.*)')


class DirectiveKind(str, Enum):
    """Every shape a single line can take."""

    BLOCK_DEFAULT = 'block_default'
    BLOCK_EMPTY = 'block'
    BLOCK_REPLACE = 'block_replace'
    BLOCK_APPEND = 'block_append'
    END_BLOCK = 'endblock'
    OTHER = 'other'
    NONE = 'none'

    @property
    def opens_block(self) -> bool:
        return self in _OPENING_KINDS


_OPENING_KINDS = frozenset(
    {
        DirectiveKind.BLOCK_DEFAULT,
        DirectiveKind.BLOCK_EMPTY,
        DirectiveKind.BLOCK_REPLACE,
        DirectiveKind.BLOCK_APPEND,
    },
)

_COMMANDS = {
    '@block_default': DirectiveKind.BLOCK_DEFAULT,
    '@block': DirectiveKind.BLOCK_EMPTY,
    '@block_replace': DirectiveKind.BLOCK_REPLACE,
    '@block_append': DirectiveKind.BLOCK_APPEND,
    '@endblock': DirectiveKind.END_BLOCK,
}


@dataclass(frozen=True)
class Directive:
    """A classified line.

    `block_id` is set only for block-opening kinds. `command` and `args` keep
    the raw tokens for `OTHER` directives.
    """

    kind: DirectiveKind
    block_id: str | None = None
    command: str | None = None
    args: tuple[str, ...] = ()

    @property
    def is_directive(self) -> bool:
        return self.kind is not DirectiveKind.NONE


NOT_A_DIRECTIVE = Directive(DirectiveKind.NONE)


def parse_directive(line: str) -> Directive:
    """Classify a single line.

    Args:
        line: One line of a file, without its line terminator.

    Returns:
        The Directive for the line. Non-directive lines return
        `NOT_A_DIRECTIVE`.

    Raises:
        MalformedDirectiveError: A block-opening command does not carry
            exactly one identifier.
    """
    match = DIRECTIVE_PATTERN.match(line.strip())
    if match is None:
        return NOT_A_DIRECTIVE

    command, *args = match.group(1).strip().split()
    kind = _COMMANDS.get(command, DirectiveKind.OTHER)

    if kind.opens_block:
        if len(args) != 1:
            msg = f'Invalid {command}: expected exactly one identifier, got {len(args)}'
            raise MalformedDirectiveError(msg, line=line)
        return Directive(kind, block_id=args[0], command=command)
    if kind is DirectiveKind.END_BLOCK:
        # trailing tokens after @endblock are tolerated
        return Directive(kind, command=command, args=tuple(args))
    return Directive(DirectiveKind.OTHER, command=command, args=tuple(args))


def comment_prefix(line: str) -> str | None:
    """Return the text up to and including `//` and the spaces after it.

    Returns None when the line is not a `//` comment.
    """
    match = COMMENT_PREFIX_PATTERN.match(line)
    if match is None:
        return None
    return f'{match.group(1)}//{match.group(2)}'


def is_comment(line: str) -> bool:
    return line.strip().startswith('//')
