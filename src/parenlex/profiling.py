"""ScanAccumulator: opt-in profiling for tokenization.

This module provides accumulated metrics across scans:
- Total profiling time
- Characters scanned
- Tokens produced
- Scans that stopped early on an unrecognized character

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from parenlex import tokenize
    from parenlex.profiling import profiled_scan

    with profiled_scan() as metrics:
        tokens = tokenize("(+ 1 1)")

    print(metrics.summary())
    # {"total_ms": 0.05, "source_length": 7, "token_count": 5, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics during tokenization.

    Attributes:
        start_time: Profiling start timestamp.
        source_length: Total characters of input handed to the scanner.
        token_count: Total tokens produced.
        scan_calls: Number of scans recorded.
        truncated_scans: Scans that ended on an unrecognized character.

    """

    start_time: float = field(default_factory=perf_counter)
    source_length: int = 0
    token_count: int = 0
    scan_calls: int = 0
    truncated_scans: int = 0

    def record_scan(
        self, source_length: int, token_count: int, truncated: bool = False
    ) -> None:
        """Record one scan.

        Args:
            source_length: Length of the scanned source string.
            token_count: Number of tokens in the result.
            truncated: Whether the scan stopped before the end of input.

        """
        self.scan_calls += 1
        self.source_length += source_length
        self.token_count += token_count
        if truncated:
            self.truncated_scans += 1

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics."""
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "source_length": self.source_length,
            "token_count": self.token_count,
            "scan_calls": self.scan_calls,
            "truncated_scans": self.truncated_scans,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled scanning.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated during scan calls.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
