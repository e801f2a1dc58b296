"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def large_expression() -> str:
    """Generate a large nested s-expression (~100KB)."""
    forms = []
    for i in range(2000):
        forms.append(f"(define item-{i} (+ (* {i} 0{i}) (/ total-{i} 7) -{i}))")
    return " ".join(forms)


@pytest.fixture
def deep_expression() -> str:
    """Deeply nested parens with no atoms between them."""
    return "(" * 20_000 + ")" * 20_000


@pytest.fixture
def long_atoms() -> str:
    """A few very long identifiers and numbers."""
    return f"(f {'a' * 50_000} {'9' * 50_000})"
