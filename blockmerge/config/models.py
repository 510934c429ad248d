from pathlib import Path

from pydantic import BaseModel, Field, field_validator


class BlockmergeConfig(BaseModel):
    """Configuration for a blockmerge run."""

    patterns: list[str] = Field(
        default_factory=list,
        description='Glob patterns of the files to merge blocks across (** is recursive)',
    )
    exclude: list[str] = Field(
        default_factory=list,
        description='Glob patterns of files to leave out of the discovered set',
    )
    strict_endblock: bool = Field(
        default=False,
        description='Fail when a @block_default or @block directive has no matching @endblock',
    )
    encoding: str = Field(
        default='utf-8',
        description='Text encoding used to read and write files',
    )
    # Path to the YAML configuration file. Set when loading from disk; excluded
    # from model serialization so it doesn't appear in dumped config data.
    config_file: Path | None = Field(
        default=None,
        description='Path to the YAML configuration file (set by loader)',
        exclude=True,
    )

    @field_validator('patterns', 'exclude')
    @classmethod
    def strip_empty_patterns(cls, value: list[str]) -> list[str]:
        """Drop blank entries so an empty YAML item does not match everything."""
        return [pattern.strip() for pattern in value if pattern.strip()]

    def with_patterns(self, patterns: list[str]) -> 'BlockmergeConfig':
        """Return a copy with extra command-line patterns added."""
        merged = [*self.patterns, *(p for p in patterns if p not in self.patterns)]
        return self.model_copy(update={'patterns': merged})
