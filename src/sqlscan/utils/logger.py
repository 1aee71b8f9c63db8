"""Logger lookup for sqlscan modules.

Every sqlscan logger lives under one namespace, so a host application can
turn scanner diagnostics on or off with a single call:

    logging.getLogger("sqlscan").setLevel(logging.DEBUG)

No handlers are installed here. The library only emits DEBUG records:
session start and finish, lexical errors, and cursor traces when
ScanConfig.trace is set.
"""

from __future__ import annotations

import logging

NAMESPACE = "sqlscan"


def get_logger(name: str) -> logging.Logger:
    """Return the stdlib logger for name, nested under the sqlscan namespace.

    Inside the package ``get_logger(__name__)`` returns the module's own
    logger unchanged; any other name is placed below ``sqlscan.``.
    """
    if name != NAMESPACE and not name.startswith(f"{NAMESPACE}."):
        name = f"{NAMESPACE}.{name}"
    return logging.getLogger(name)
