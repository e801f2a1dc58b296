"""Detect truncated scans, then retry in strict mode for a precise error.

tokenize() silently stops at the first unrecognized character. scan()
exposes the stop point; strict mode turns it into an exception.
"""

import logging

from parenlex import LexConfig, LexError, lex_config_context, scan
from parenlex.serialization import to_json

logging.basicConfig(level=logging.DEBUG)

SOURCES = [
    "(+ 1 1)",
    "(define x 3.14)",
    '(print "hello")',
]

for source in SOURCES:
    result = scan(source, source_file="<example>")
    if result.complete:
        print(f"{source!r}: {len(result.tokens)} tokens")
        print(to_json(result.tokens, indent=2))
        continue

    print(f"{source!r}: stopped after {result.consumed} chars at {result.stopped_at!r}")
    with lex_config_context(LexConfig(strict=True)):
        try:
            scan(source, source_file="<example>")
        except LexError as e:
            print(f"  strict: {e}")
