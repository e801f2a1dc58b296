"""
parenlex: Tokenizer for parenthesized expressions

Turns s-expression text into a flat list of typed tokens (open paren,
close paren, identifier, number) for a downstream parser. One left-to-right
pass, no backtracking, zero runtime dependencies.

Quick Start:
    >>> from parenlex import tokenize
    >>> tokenize("(+ 1 1)")
    [Token(OPEN_PARENS), Token(IDENTIFIER, '+'), Token(NUMBER, '1'), Token(NUMBER, '1'), Token(CLOSE_PARENS)]

Early termination:
    An unrecognized character (anything but space, parens, ASCII letters,
    digits and ``+ - * /``) silently ends the scan. Use ``scan`` to learn
    where and why:

    >>> from parenlex import scan
    >>> result = scan("(a\\tb)")
    >>> result.tokens, result.consumed, result.complete
    ([Token(OPEN_PARENS), Token(IDENTIFIER, 'a')], 2, False)

Installation:
    pip install parenlex
"""

from parenlex.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from parenlex.errors import LexError, ParenlexError, SerializationError
from parenlex.lexer import Lexer, ScanResult, StopReason
from parenlex.location import SourceLocation
from parenlex.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from parenlex.serialization import from_dict, from_json, to_dict, to_json
from parenlex.text import join_tokens, reconstruct
from parenlex.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(source: str) -> list[Token]:
    """Tokenize s-expression text.

    Never raises with the default configuration: on an unrecognized
    character the tokens scanned so far are returned and the rest of the
    input is discarded.

    Args:
        source: Text to scan (any length, including empty)

    Returns:
        Tokens in order of appearance

    Example:
        >>> tokenize("(operation operand0 0987654321 operand1)")[3]
        Token(NUMBER, '0987654321')
    """
    return Lexer(source).scan().tokens


def scan(source: str, *, source_file: str | None = None) -> ScanResult:
    """Tokenize s-expression text and report the stop point.

    Args:
        source: Text to scan
        source_file: Optional source file path carried into token locations

    Returns:
        ScanResult with tokens, consumed length and stop reason

    """
    return Lexer(source, source_file=source_file).scan()


__all__ = [
    # Core API
    "tokenize",
    "scan",
    "Lexer",
    "ScanResult",
    "StopReason",
    # Tokens
    "Token",
    "TokenType",
    "SourceLocation",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "set_lex_config",
    "reset_lex_config",
    "lex_config_context",
    # Errors
    "ParenlexError",
    "LexError",
    "SerializationError",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Text
    "join_tokens",
    "reconstruct",
    "__version__",
]
