"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Only ASCII characters are ever classified as meaningful. Unicode letters
and digits (e.g. "é", "٣") fall outside every set and stop a scan.

Usage:
    from parenlex.charsets import IDENTIFIER_START

    if char in IDENTIFIER_START:  # O(1) lookup
        ...
"""

import string

# Only the plain space separates tokens; tab and newline are unrecognized
SPACE = " "

OPEN_PARENS = "("
CLOSE_PARENS = ")"

ASCII_DIGITS: frozenset[str] = frozenset(string.digits)

ASCII_LETTERS: frozenset[str] = frozenset(string.ascii_letters)

# Arithmetic symbols allowed to start (and continue) an identifier
IDENTIFIER_SYMBOLS: frozenset[str] = frozenset("+-*/")

IDENTIFIER_START: frozenset[str] = ASCII_LETTERS | IDENTIFIER_SYMBOLS

IDENTIFIER_CONTINUE: frozenset[str] = IDENTIFIER_START | ASCII_DIGITS

# Every character that can begin a step of the scan
RECOGNIZED: frozenset[str] = IDENTIFIER_CONTINUE | frozenset(
    (SPACE, OPEN_PARENS, CLOSE_PARENS)
)


def is_space(char: str) -> bool:
    return char == SPACE


def is_open_parens(char: str) -> bool:
    return char == OPEN_PARENS


def is_close_parens(char: str) -> bool:
    return char == CLOSE_PARENS


def is_identifier_start(char: str) -> bool:
    """Check if character is an ASCII letter or one of ``+ - * /``."""
    return char in IDENTIFIER_START


def is_identifier_continue(char: str) -> bool:
    """Check if character may appear after the first identifier character."""
    return char in IDENTIFIER_CONTINUE


def is_digit(char: str) -> bool:
    """Check if character is an ASCII decimal digit.

    Unlike ``str.isdigit``, rejects non-ASCII digits and superscripts.
    """
    return char in ASCII_DIGITS


def is_recognized(char: str) -> bool:
    return char in RECOGNIZED
