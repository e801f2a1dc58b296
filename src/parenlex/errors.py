"""Exception classes for parenlex.

The default scan never raises. These exceptions surface only in strict
mode (see parenlex.config) and when deserializing malformed token data.
"""

from __future__ import annotations


class ParenlexError(Exception):
    """Base exception for all parenlex errors.

    Subclass this for specific error categories.
    """

    pass


class LexError(ParenlexError):
    """Unrecognized character met during a strict scan.

    Raised instead of silently truncating when LexConfig.strict is set.
    """

    def __init__(
        self,
        message: str,
        offset: int | None = None,
        character: str | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize lex error with optional location.

        Args:
            message: Error description
            offset: Offset of the offending character (0-indexed)
            character: The offending character
            source_file: Path to source file (optional)
        """
        self.message = message
        self.offset = offset
        self.character = character
        self.source_file = source_file

        # Build formatted message
        location = ""
        if source_file:
            location = f"{source_file}:"
        if offset is not None:
            location += f"{offset + 1}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class SerializationError(ParenlexError):
    """Malformed data passed to token deserialization."""

    pass
