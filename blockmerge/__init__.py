from .engine import (
    Rewritten,
    SourceFile,
    Unchanged,
    merge_sources,
)
from .exceptions import BlockmergeError, MalformedDirectiveError, UnterminatedBlockError

__all__ = [
    'BlockmergeError',
    'MalformedDirectiveError',
    'Rewritten',
    'SourceFile',
    'Unchanged',
    'UnterminatedBlockError',
    'merge_sources',
]
