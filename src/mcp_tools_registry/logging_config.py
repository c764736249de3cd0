"""Logging setup for the command-line entry points.

Library modules only create ``logging.getLogger(__name__)`` loggers. The
CLI and the MCP server call ``setup_logging`` once per invocation to
attach a handler. Output goes to stderr because stdout carries command
output (and, for the MCP server, the protocol stream).
"""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "mcp_tools_registry"

_handler: logging.Handler | None = None


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the package logger.

    Replaces the handler installed by a previous call, so the handler
    always writes to the current ``sys.stderr``.

    Args:
        verbose: If True, log at DEBUG; otherwise WARNING.

    Returns:
        The package logger.
    """
    global _handler

    logger = logging.getLogger(PACKAGE_LOGGER)
    level = logging.DEBUG if verbose else logging.WARNING
    logger.setLevel(level)

    if _handler is not None:
        logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
    _handler.setLevel(level)
    logger.addHandler(_handler)
    return logger
