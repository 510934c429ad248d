from blockmerge.exceptions.core import BlockmergeError


class DirectiveError(BlockmergeError):
    """Base class for errors raised while scanning directive comments.

    Carries the location of the offending line when it is known so the
    message points the user at the exact spot.
    """

    log_category = 'directive_error'

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        self.message = message
        self.path = path
        self.line_number = line_number
        self.line = line
        super().__init__(self._format())

    def _format(self) -> str:
        location = ''
        if self.path is not None:
            location = self.path
            if self.line_number is not None:
                location = f'{location}:{self.line_number}'
        text = f'{location}: {self.message}' if location else self.message
        if self.line is not None:
            text = f'{text}\n    {self.line.strip()}'
        return text

    def with_location(self, path: str, line_number: int, line: str) -> 'DirectiveError':
        """Return a copy of this error bound to a file position."""
        return type(self)(self.message, path=path, line_number=line_number, line=line)


class MalformedDirectiveError(DirectiveError):
    """A block directive has the wrong number of arguments."""

    log_category = 'malformed_directive'


class UnterminatedBlockError(DirectiveError):
    """A @block_default or @block directive has no matching @endblock."""

    log_category = 'unterminated_block'
