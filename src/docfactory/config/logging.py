"""Library-scoped logging for docfactory.

Modules log through ``logging.getLogger(__name__)`` and never configure
logging themselves. A host application that wants docfactory's records
rendered by structlog calls :func:`configure_logging`, which attaches one
handler to the ``docfactory`` logger only. Root handlers, the root level
and the global structlog configuration are left alone.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "docfactory"

# Marks handlers installed here so repeat calls replace rather than stack.
_HANDLER_FLAG = "_docfactory_handler"


def _build_formatter(log_json: bool) -> structlog.stdlib.ProcessorFormatter:
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )


def _owned_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _HANDLER_FLAG, False)]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    propagate: bool = False,
) -> logging.Logger:
    """Render docfactory log records through structlog on stderr.

    Args:
        verbose: DEBUG level for ``docfactory``. When False, only WARNING+.
        log_json: JSON lines instead of console output.
        propagate: Also pass records on to the host's root handlers.

    Returns:
        The configured ``docfactory`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in _owned_handlers(logger):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter(log_json))
    setattr(handler, _HANDLER_FLAG, True)

    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = propagate
    return logger


def reset_logging() -> None:
    """Undo :func:`configure_logging`: drop its handler, restore defaults."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in _owned_handlers(logger):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
