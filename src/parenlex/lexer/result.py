"""Scan outcome types.

A scan always returns normally (outside strict mode). ScanResult records
where and why it ended so callers can tell a complete scan from a
truncated one.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from parenlex.location import SourceLocation
from parenlex.tokens import Token


class StopReason(Enum):
    """Why the scan loop ended."""

    END_OF_INPUT = auto()  # Every character consumed
    UNRECOGNIZED_CHARACTER = auto()  # Early termination


@dataclass(frozen=True, slots=True)
class ScanResult:
    """Tokens plus the stop point of one scan.

    Attributes:
        tokens: Tokens in order of appearance (same as tokenize())
        consumed: Offset of the first unconsumed character
        stop_reason: Why the scan ended
        stopped_at: The unrecognized character, or None on a complete scan
        source_file: Optional source file path

    The unscanned remainder is ``source[result.consumed:]``. A result is
    always truthy, even with no tokens; check ``complete`` for truncation.
    Results compare by value but are unhashable, since ``tokens`` is a list
    owned by the caller.

    """

    # Unhashable: holds a mutable token list
    __hash__ = None  # type: ignore[assignment]

    tokens: list[Token] = field(default_factory=list)
    consumed: int = 0
    stop_reason: StopReason = StopReason.END_OF_INPUT
    stopped_at: str | None = None
    source_file: str | None = None

    @property
    def complete(self) -> bool:
        return self.stop_reason is StopReason.END_OF_INPUT

    @property
    def stop_location(self) -> SourceLocation:
        """Location of the stop point (zero-width at end of input)."""
        end = self.consumed if self.stopped_at is None else self.consumed + 1
        return SourceLocation(
            offset=self.consumed, end_offset=end, source_file=self.source_file
        )
