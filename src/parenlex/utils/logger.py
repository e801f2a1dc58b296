"""Logger naming for parenlex.

Every parenlex logger lives under the ``parenlex`` namespace, so one
level setting covers the whole package. The only records emitted today
come from ``parenlex.lexer.core``: a DEBUG record each time a scan stops
on an unrecognized character (see LexConfig.log_truncation).

No handlers are installed; configure them in the application.

Example:
    >>> import logging
    >>> from parenlex import tokenize
    >>> logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG)
    >>> tokenize("(a\\tb)")  # logs "Scan stopped at offset 2 ..."
"""

from __future__ import annotations

import logging

LOGGER_NAME = "parenlex"


def get_logger(name: str) -> logging.Logger:
    """Get a logger inside the parenlex namespace.

    Args:
        name: Logger name (typically __name__); prefixed with
            ``parenlex.`` when it is not already inside the namespace

    Returns:
        logging.Logger instance

    Example:
        >>> get_logger("lexer.core").name
        'parenlex.lexer.core'
    """
    if name != LOGGER_NAME and not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
