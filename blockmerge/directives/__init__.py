"""Directive parsing for blockmerge.

This package turns file text into block occurrences: recognizing directive
comments, extracting their indentation-sensitive template bodies, and scanning
whole files for the blocks they declare.
"""

from blockmerge.directives.content import ContentLine, ContentRun, extract_content
from blockmerge.directives.recognizer import (
    Directive,
    DirectiveKind,
    comment_prefix,
    parse_directive,
)
from blockmerge.directives.scanner import (
    BlockOccurrence,
    BlockRole,
    FileRecord,
    scan_file,
    split_lines,
)

__all__ = [
    'BlockOccurrence',
    'BlockRole',
    'ContentLine',
    'ContentRun',
    'Directive',
    'DirectiveKind',
    'FileRecord',
    'comment_prefix',
    'extract_content',
    'parse_directive',
    'scan_file',
    'split_lines',
]
