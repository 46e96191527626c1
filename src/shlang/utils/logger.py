"""Logger lookup for Shlang modules.

Every logger lives under the ``shlang`` namespace, so one handler on
``logging.getLogger("shlang")`` sees all library output:

- ``shlang.parser`` logs DEBUG records when a parse starts and finishes.
- ``shlang.compiler`` logs a DEBUG record per lex call, and each formatted
  error at ERROR unless the Compiler is ``silent``.

The library never configures handlers itself.

Example:
    >>> import logging
    >>> logging.getLogger("shlang").setLevel(logging.DEBUG)
"""

from __future__ import annotations

import logging

ROOT_LOGGER_NAME = "shlang"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``shlang`` namespace.

    Names already under the namespace are used as is, anything else is
    nested below it.

    Example:
        >>> get_logger("shlang.parser").name
        'shlang.parser'
        >>> get_logger("plugin").name
        'shlang.plugin'
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
