"""Single-pass s-expression scanner with O(n) guaranteed performance.

Repeatedly inspects the character at the cursor, dispatches it through an
ordered table of (predicate, rule) pairs, and advances the cursor by the
number of characters the rule consumed. There is no backtracking: every
step advances the cursor or ends the scan.

No regex in the hot path.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from parenlex.charsets import (
    is_close_parens,
    is_digit,
    is_identifier_start,
    is_open_parens,
    is_space,
)
from parenlex.config import get_lex_config
from parenlex.errors import LexError
from parenlex.lexer.result import ScanResult, StopReason
from parenlex.lexer.rules import (
    Rule,
    close_parens_rule,
    identifier_rule,
    number_rule,
    open_parens_rule,
)
from parenlex.profiling import get_scan_accumulator
from parenlex.tokens import Token
from parenlex.utils.logger import get_logger

logger = get_logger(__name__)

# Evaluated in priority order. A None rule skips the character silently.
DISPATCH_TABLE: tuple[tuple[Callable[[str], bool], Rule | None], ...] = (
    (is_space, None),
    (is_open_parens, open_parens_rule),
    (is_close_parens, close_parens_rule),
    (is_identifier_start, identifier_rule),
    (is_digit, number_rule),
)


class Lexer:
    """Single-pass scanner for parenthesized expressions.

    Usage:
            >>> lexer = Lexer("(+ 1 1)")
            >>> for token in lexer.tokenize():
            ...     print(token)
        Token(OPEN_PARENS)
        Token(IDENTIFIER, '+')
        Token(NUMBER, '1')
        Token(NUMBER, '1')
        Token(CLOSE_PARENS)

    After iteration, ``pos`` holds the stop offset and ``stop_reason``
    tells whether the whole input was consumed.

    Thread Safety:
        Lexer instances are single-use. Create one per source string.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_pos",
        "_source_file",
        "_stop_reason",
        "_stopped_at",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Text to scan
            source_file: Optional source file path for error messages
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._source_file = source_file
        self._stop_reason: StopReason | None = None
        self._stopped_at: str | None = None

    @property
    def pos(self) -> int:
        """Offset of the first unconsumed character."""
        return self._pos

    @property
    def stop_reason(self) -> StopReason | None:
        """Why the scan ended, or None while it is still running."""
        return self._stop_reason

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into a token stream.

        Yields:
            Token objects one at a time, left to right

        Raises:
            LexError: Only when the active LexConfig is strict and an
                unrecognized character is met.

        Complexity: O(n) where n = len(source)
        """
        source = self._source
        source_len = self._source_len
        source_file = self._source_file

        while self._pos < source_len:
            char = source[self._pos]
            for matches, rule in DISPATCH_TABLE:
                if matches(char):
                    break
            else:
                self._stop_early(char)
                return

            if rule is None:
                self._pos += 1
                continue

            token, self._pos = rule(source, self._pos, source_file)
            yield token

        self._stop_reason = StopReason.END_OF_INPUT

    def scan(self) -> ScanResult:
        """Drain tokenize() and report where the scan stopped."""
        tokens = list(self.tokenize())
        result = ScanResult(
            tokens=tokens,
            consumed=self._pos,
            stop_reason=self._stop_reason or StopReason.END_OF_INPUT,
            stopped_at=self._stopped_at,
            source_file=self._source_file,
        )

        acc = get_scan_accumulator()
        if acc is not None:
            acc.record_scan(
                source_length=self._source_len,
                token_count=len(tokens),
                truncated=not result.complete,
            )
        return result

    def _stop_early(self, char: str) -> None:
        """End the scan on an unrecognized character."""
        self._stop_reason = StopReason.UNRECOGNIZED_CHARACTER
        self._stopped_at = char

        config = get_lex_config()
        if config.strict:
            raise LexError(
                f"unrecognized character {char!r}",
                offset=self._pos,
                character=char,
                source_file=self._source_file,
            )
        if config.log_truncation:
            logger.debug(
                "Scan stopped at offset %d on unrecognized character %r; "
                "%d characters left unscanned",
                self._pos,
                char,
                self._source_len - self._pos,
            )
