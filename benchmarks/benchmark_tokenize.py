"""Benchmark tokenization throughput.

Run with:
    pytest benchmarks/benchmark_tokenize.py -v --benchmark-only
"""

import pytest

from parenlex import scan, tokenize


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_large_expression(benchmark, large_expression):
    """Many short atoms separated by spaces."""
    benchmark(tokenize, large_expression)


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_deep_expression(benchmark, deep_expression):
    """Parens only: one dispatch per character."""
    benchmark(tokenize, deep_expression)


@pytest.mark.benchmark(group="tokenize")
def test_benchmark_long_atoms(benchmark, long_atoms):
    """Long greedy runs inside the identifier and number rules."""
    benchmark(tokenize, long_atoms)


@pytest.mark.benchmark(group="scan")
def test_benchmark_scan_truncated(benchmark, large_expression):
    """Early stop halfway through a large input."""
    half = len(large_expression) // 2
    source = large_expression[:half] + "\t" + large_expression[half:]
    result = benchmark(scan, source)
    assert not result.complete
