"""Rebuild source text from tokens.

Example:
    >>> from parenlex import tokenize, join_tokens
    >>> join_tokens(tokenize("(+   1 1)"))
    '( + 1 1 )'
"""

from parenlex.charsets import SPACE
from parenlex.tokens import Token


def join_tokens(tokens: list[Token]) -> str:
    """Join token lexemes with single spaces.

    Re-tokenizing the result yields the same token types and values,
    though not the original spacing.
    """
    return SPACE.join(t.value for t in tokens)


def reconstruct(tokens: list[Token], consumed: int | None = None) -> str:
    """Rebuild the scanned prefix of a source from token offsets.

    Gaps between tokens can only have been single spaces, so they are
    refilled with spaces. Pass ``consumed`` (from ScanResult) to restore
    trailing spaces after the last token.

    For tokens straight from a scan, the result equals
    ``source[:consumed]``.
    """
    parts: list[str] = []
    pos = 0
    for token in tokens:
        if token.offset > pos:
            parts.append(SPACE * (token.offset - pos))
        parts.append(token.value)
        pos = token.end_offset
    if consumed is not None and consumed > pos:
        parts.append(SPACE * (consumed - pos))
    return "".join(parts)


__all__ = ["join_tokens", "reconstruct"]
