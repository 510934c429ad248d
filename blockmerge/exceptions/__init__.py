from blockmerge.exceptions.config import (
    ConfigError,
    ConfigValidationError,
)
from blockmerge.exceptions.core import (
    BlockmergeError,
    FileAccessError,
    log_exception,
)
from blockmerge.exceptions.directives import (
    DirectiveError,
    MalformedDirectiveError,
    UnterminatedBlockError,
)

__all__ = [
    'BlockmergeError',
    'ConfigError',
    'ConfigValidationError',
    'DirectiveError',
    'FileAccessError',
    'MalformedDirectiveError',
    'UnterminatedBlockError',
    'log_exception',
]
