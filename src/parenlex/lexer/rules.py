"""Sub-rules of the scanner.

Every rule shares one calling convention:

    rule(source, pos) -> (token, new_pos)

The precondition is that ``source[pos]`` belongs to the rule's start class;
the dispatcher in parenlex.lexer.core checks it before calling. Each rule
consumes at least one character, so ``new_pos > pos`` always holds.

Rules are pure functions: no state, no position mutation outside the
returned cursor.
"""

from __future__ import annotations

from collections.abc import Callable

from parenlex.charsets import is_digit, is_identifier_continue
from parenlex.tokens import (
    CLOSE_PARENS_LEXEME,
    OPEN_PARENS_LEXEME,
    Token,
    TokenType,
)

Rule = Callable[..., tuple[Token, int]]


def _scan_run(source: str, pos: int, accept: Callable[[str], bool]) -> int:
    """Return the end of the longest run starting at pos accepted by accept."""
    end = pos
    source_len = len(source)
    while end < source_len and accept(source[end]):
        end += 1
    return end


def open_parens_rule(
    source: str, pos: int, source_file: str | None = None
) -> tuple[Token, int]:
    return Token(
        TokenType.OPEN_PARENS, OPEN_PARENS_LEXEME, pos, pos + 1, source_file
    ), pos + 1


def close_parens_rule(
    source: str, pos: int, source_file: str | None = None
) -> tuple[Token, int]:
    return Token(
        TokenType.CLOSE_PARENS, CLOSE_PARENS_LEXEME, pos, pos + 1, source_file
    ), pos + 1


def identifier_rule(
    source: str, pos: int, source_file: str | None = None
) -> tuple[Token, int]:
    """Consume the longest run of identifier-continue characters.

    The first character was already checked as identifier-start, and every
    start character is also a continue character. Digits may follow the
    first character, so ``-1`` and ``operand0`` are identifiers.
    """
    end = _scan_run(source, pos, is_identifier_continue)
    return Token(TokenType.IDENTIFIER, source[pos:end], pos, end, source_file), end


def number_rule(
    source: str, pos: int, source_file: str | None = None
) -> tuple[Token, int]:
    """Consume the longest run of ASCII decimal digits.

    The text is kept verbatim: leading zeros and arbitrary length survive.
    """
    end = _scan_run(source, pos, is_digit)
    return Token(TokenType.NUMBER, source[pos:end], pos, end, source_file), end


__all__ = [
    "Rule",
    "close_parens_rule",
    "identifier_rule",
    "number_rule",
    "open_parens_rule",
]
