"""Token and TokenType definitions for the parenlex scanner.

The scanner produces a flat list of Token objects for a downstream parser.
Each Token has a type, a string value, and the source offsets it came from.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

Performance Note:
Token stores raw offsets and lazily creates SourceLocation on demand.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from parenlex.location import SourceLocation


class TokenType(Enum):
    """Token types produced by the scanner.

    The set is closed: every token is exactly one of these.

    """

    OPEN_PARENS = auto()  # (
    CLOSE_PARENS = auto()  # )
    NUMBER = auto()  # 0987654321
    IDENTIFIER = auto()  # an-identifier-123, +, -1


# Fixed lexemes for payload-free token types
OPEN_PARENS_LEXEME = "("
CLOSE_PARENS_LEXEME = ")"


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the scanner.

    Attributes:
        type: The token type (from TokenType enum)
        value: The verbatim source text of the token. Parens carry their
            fixed lexeme; numbers are never converted to int.
        _start_offset: Absolute start position in source
        _end_offset: Absolute end position in source (exclusive)
        _source_file: Optional source file path

    Offsets and source file are excluded from comparison, so two tokens are
    equal when their type and value are equal.

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    type: TokenType
    value: str
    _start_offset: int = field(default=0, compare=False)
    _end_offset: int = field(default=0, compare=False)
    _source_file: str | None = field(default=None, compare=False)
    # Cache field - excluded from repr and comparison
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False, hash=False
    )

    @classmethod
    def open_parens(cls) -> Token:
        return cls(TokenType.OPEN_PARENS, OPEN_PARENS_LEXEME)

    @classmethod
    def close_parens(cls) -> Token:
        return cls(TokenType.CLOSE_PARENS, CLOSE_PARENS_LEXEME)

    @classmethod
    def number(cls, text: str) -> Token:
        return cls(TokenType.NUMBER, text)

    @classmethod
    def identifier(cls, text: str) -> Token:
        return cls(TokenType.IDENTIFIER, text)

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached).

        Returns:
            SourceLocation object for this token.
        """
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from parenlex.location import SourceLocation

        loc = SourceLocation(
            offset=self._start_offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        # Safe mutation of frozen dataclass cache field (idempotent write)
        object.__setattr__(self, "_location_cache", loc)
        return loc

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        if self.type in (TokenType.OPEN_PARENS, TokenType.CLOSE_PARENS):
            return f"Token({self.type.name})"
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r})"

    @property
    def offset(self) -> int:
        """Start offset (convenience accessor)."""
        return self._start_offset

    @property
    def end_offset(self) -> int:
        """End offset (convenience accessor)."""
        return self._end_offset
