"""
Logging module for the resolution engine.

Every roll, armor class and damage adjustment is traced at DEBUG level on
the ``resolver`` logger; problems are reported at ERROR level right before
the matching exception is raised. Output goes through rich once a caller
opts in with ``setup_logging``.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

ENGINE_LOGGER = "resolver"

logger = logging.getLogger(ENGINE_LOGGER)


def setup_logging(level: int = logging.INFO, console: Console | None = None) -> RichHandler:
    """
    Routes the engine's log records to a rich handler.

    Only the engine logger is configured, so an embedding application keeps
    control of the root logger.

    Args:
        level (int): The minimum level to emit. DEBUG shows every roll.
        console (Console | None): Where to print. Stderr if None.

    Returns:
        RichHandler: The installed handler.

    """
    handler = RichHandler(
        console=console or Console(stderr=True, width=120),
        show_time=True,
        show_level=True,
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s - %(message)s", datefmt="[%X]"))

    # Replace a previous rich handler instead of stacking them.
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def _with_context(message: str, context: dict[str, Any] | None) -> str:
    if not context:
        return message
    context_str = " ".join(f"{k}={v}" for k, v in context.items())
    return f"{message} [{context_str}]"


def log_error(message: str, context: dict[str, Any] | None = None) -> None:
    """
    Logs an error with optional context, formatted as key=value pairs.

    Args:
        message (str): The error message.
        context (dict[str, Any] | None): Optional context dictionary.

    """
    logger.error(_with_context(message, context))


def log_debug(message: str, context: dict[str, Any] | None = None) -> None:
    """Logs a resolution trace, building the context only when DEBUG is on."""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(_with_context(message, context))
