"""
Component loggers.
"""

import logging as stdlib_logging
from typing import Any

import structlog


def get_logger(component: str, layer: str = "domain") -> Any:
    """
    Return a structlog logger for a vectorix component.

    The logger wraps the stdlib logger named ``component``, so until an
    application configures logging, events below WARNING are dropped by
    stdlib's default level instead of being printed.

    Args:
        component: Component name, usually ``__name__``
        layer: Layer name ("domain", "common")

    Returns:
        A lazily bound structlog logger carrying ``layer`` and ``component``
    """
    return structlog.wrap_logger(
        stdlib_logging.getLogger(component),
        layer=layer,
        component=component,
    )
