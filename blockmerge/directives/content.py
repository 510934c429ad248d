"""Extraction of template bodies written inside `//` comments.

A template body is the run of comment lines directly below a block-opening
directive. The first non-blank body line fixes the *template indent*: the
spaces between `//` and its text. That indent is stripped from every line of
the run so deeper indentation survives as relative indentation:

    // @block_replace ITEMS
    //   if (x) {
    //     y();
    //   }

yields ``if (x) {``, ``  y();`` and ``}``.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from blockmerge.directives.recognizer import (
    COMMENT_LINE_PATTERN,
    parse_directive,
)


@dataclass(frozen=True)
class ContentLine:
    """One normalized line of a template body."""

    indent: str
    """Whitespace before the `//` marker in the source line."""
    comment_spaces: str
    """Spaces between `//` and the text in the source line."""
    text: str
    """The line's text after `indent` has been stripped."""
    is_blank: bool = False

    def render(self, base_indent: str) -> str:
        """Return the line as it appears once instantiated at `base_indent`."""
        if self.is_blank:
            return ''
        return f'{base_indent}{self.text}'


@dataclass(frozen=True)
class ContentRun:
    """Result of extracting a template body."""

    lines: tuple[ContentLine, ...]
    next_line: int
    """Index of the first line that was not consumed."""
    template_indent: str | None


@dataclass(frozen=True)
class _RawLine:
    indent: str
    comment_spaces: str
    text: str

    @property
    def is_blank(self) -> bool:
        return self.text.strip() == ''


def extract_content(
    lines: Sequence[str],
    start: int,
    base_prefix: str,
) -> ContentRun:
    """Consume the template body that starts at `lines[start]`.

    Args:
        lines: All lines of the file.
        start: Index of the line right after the opening directive.
        base_prefix: The opening directive's comment prefix (leading
            whitespace, `//` and the spaces that follow it).

    Returns:
        The normalized body lines and the index where the run stopped.
    """
    raw: list[_RawLine] = []
    template_indent: str | None = None
    index = start

    while index < len(lines):
        line = lines[index]
        stripped = line.strip()

        # blank lines, code and directives all end the body
        if not stripped.startswith('//'):
            break
        if parse_directive(line).is_directive:
            break

        match = COMMENT_LINE_PATTERN.match(line)
        if match is None:
            break
        indent, comment_spaces, text = match.groups()

        prefix_width = len(indent) + len('//') + len(comment_spaces)
        if prefix_width < len(base_prefix) and stripped != '//':
            break

        entry = _RawLine(indent, comment_spaces, text)
        if template_indent is None and not entry.is_blank:
            template_indent = comment_spaces
        raw.append(entry)
        index += 1

    return ContentRun(
        lines=tuple(_normalize(entry, template_indent) for entry in raw),
        next_line=index,
        template_indent=template_indent,
    )


def _normalize(entry: _RawLine, template_indent: str | None) -> ContentLine:
    if entry.is_blank:
        return ContentLine(entry.indent, entry.comment_spaces, '', is_blank=True)

    spaces = entry.comment_spaces
    if template_indent is not None and spaces.startswith(template_indent):
        text = spaces[len(template_indent) :] + entry.text
    elif template_indent is not None and len(spaces) < len(template_indent):
        # shallower than the template indent: column zero
        text = entry.text
    elif not spaces:
        text = entry.text
    else:
        text = spaces + entry.text
    return ContentLine(entry.indent, entry.comment_spaces, text)
