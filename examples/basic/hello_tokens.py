"""Tokenize an s-expression with zero config, zero deps."""

from parenlex import tokenize

for token in tokenize("(operation operand0 0987654321 operand1)"):
    print(token)
