"""Source location tracking for error messages and debugging.

Provides SourceLocation dataclass for tracking positions in source text.

A scan never crosses a newline (newline is not a recognized character),
so every location lives on a single line and is described by offsets alone.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Source location for error messages and debugging.

    Attributes:
        offset: Absolute start offset in source (0-indexed)
        end_offset: Absolute end offset in source (exclusive)
        source_file: Source file path (optional)

    Examples:
            >>> loc = SourceLocation(offset=3, end_offset=5, source_file="expr.sx")
            >>> str(loc)
            'expr.sx:4'

    """

    offset: int
    end_offset: int = 0
    source_file: str | None = None

    @property
    def col_offset(self) -> int:
        """Column of the start offset (1-indexed)."""
        return self.offset + 1

    @property
    def length(self) -> int:
        return max(self.end_offset - self.offset, 0)

    def __str__(self) -> str:
        """Format location for error messages.

        Returns:
            Formatted string like "file.sx:5" or "5"
        """
        if self.source_file:
            return f"{self.source_file}:{self.col_offset}"
        return f"{self.col_offset}"

    def span_to(self, end: SourceLocation) -> SourceLocation:
        """Create a new location spanning from this location to end."""
        return SourceLocation(
            offset=self.offset,
            end_offset=end.end_offset or end.offset,
            source_file=self.source_file,
        )
