"""Single-pass scanner for parenthesized expressions.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, ScanResult, StopReason
├── core.py              # Lexer class (dispatch table + scan loop)
├── rules.py             # Sub-rules: (source, pos) -> (token, new_pos)
└── result.py            # ScanResult, StopReason

Usage:
    >>> from parenlex.lexer import Lexer
    >>> list(Lexer("()").tokenize())
    [Token(OPEN_PARENS), Token(CLOSE_PARENS)]

"""

from parenlex.lexer.core import Lexer
from parenlex.lexer.result import ScanResult, StopReason

__all__ = ["Lexer", "ScanResult", "StopReason"]
