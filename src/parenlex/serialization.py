"""Token serialization: JSON round-trip for token streams.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Caching token streams between processes
- Handing tokens to a parser written in another language
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from parenlex import tokenize
    from parenlex.serialization import to_json, from_json

    tokens = tokenize("(+ 1 1)")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure: safe to call from any thread.

"""

import json
from typing import Any

from parenlex.charsets import is_digit, is_identifier_continue, is_identifier_start
from parenlex.errors import SerializationError
from parenlex.tokens import (
    CLOSE_PARENS_LEXEME,
    OPEN_PARENS_LEXEME,
    Token,
    TokenType,
)


def _valid_value(token_type: TokenType, value: str) -> bool:
    if token_type is TokenType.OPEN_PARENS:
        return value == OPEN_PARENS_LEXEME
    if token_type is TokenType.CLOSE_PARENS:
        return value == CLOSE_PARENS_LEXEME
    if not value:
        return False
    if token_type is TokenType.NUMBER:
        return all(is_digit(c) for c in value)
    return is_identifier_start(value[0]) and all(
        is_identifier_continue(c) for c in value
    )


def to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict.

    Args:
        token: Any parenlex Token.

    Returns:
        Dict with ``type``, ``value``, ``offset`` and ``end_offset``.

    """
    return {
        "type": token.type.name,
        "value": token.value,
        "offset": token.offset,
        "end_offset": token.end_offset,
    }


def from_dict(data: dict[str, Any]) -> Token:
    """Reconstruct a token from a dict produced by to_dict.

    The value must be one the scanner could have produced for that type.

    Raises:
        SerializationError: Unknown type name, missing field, a value
            that does not match its token type, or offsets that are not
            non-negative ints spanning exactly the value.

    """
    try:
        type_name = data["type"]
        value = data["value"]
    except (KeyError, TypeError) as e:
        raise SerializationError(f"Malformed token data: {data!r}") from e

    try:
        token_type = TokenType[type_name]
    except (KeyError, TypeError) as e:
        raise SerializationError(f"Unknown token type: {type_name!r}") from e

    if not isinstance(value, str) or not _valid_value(token_type, value):
        raise SerializationError(
            f"Invalid value {value!r} for token type {token_type.name}"
        )

    offset = data.get("offset", 0)
    if not _is_offset(offset):
        raise SerializationError(f"Invalid offset: {offset!r}")
    end_offset = data.get("end_offset", offset + len(value))
    if not _is_offset(end_offset) or end_offset - offset != len(value):
        raise SerializationError(
            f"Invalid end_offset {end_offset!r} for value {value!r} at {offset}"
        )
    return Token(token_type, value, offset, end_offset)


def _is_offset(value: Any) -> bool:
    # bool is an int subclass
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def to_json(tokens: list[Token], *, indent: int | None = None) -> str:
    """Serialize a token stream to a JSON array string."""
    return json.dumps(
        [to_dict(t) for t in tokens],
        indent=indent,
        sort_keys=True,
        ensure_ascii=False,
    )


def from_json(json_str: str) -> list[Token]:
    """Deserialize a JSON array string into a token stream."""
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise SerializationError("Expected a JSON array of tokens")
    return [from_dict(item) for item in data]


__all__ = ["from_dict", "from_json", "to_dict", "to_json"]
