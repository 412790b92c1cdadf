"""Opt-in structlog output for the ``jmap_client`` logger hierarchy.

Every module of the package logs through ``structlog.get_logger()``, which
resolves to a stdlib logger named after the module (``jmap_client.client``,
``jmap_client.transport``, ...).  :func:`setup_logging` renders those events
on a handler of its own attached to the ``jmap_client`` logger.  The root
logger and any handler installed by the embedding application are left
alone.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

LOGGER_NAME = "jmap_client"


class _JmapClientHandler(logging.StreamHandler):
    """Marks the handler installed by :func:`setup_logging`."""


def setup_logging(
    *,
    json: bool = False,
    level: str = "INFO",
    stream: TextIO | None = None,
) -> logging.Handler:
    """Render ``jmap_client`` events on *stream* and return the handler used.

    Calling it again replaces the handler installed by the previous call.
    Records do not propagate to the root logger once this is set up, so they
    are not emitted twice when the application logs to the root as well.

    Parameters
    ----------
    json:
        If *True*, output JSON lines.  If *False* (the default), use the
        human-friendly console renderer.
    level:
        Level name for the ``jmap_client`` logger (e.g. ``"DEBUG"``).
    stream:
        Destination of the log lines, ``sys.stderr`` when omitted.
    """
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    if json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = _JmapClientHandler(stream or sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    for previous in [h for h in logger.handlers if isinstance(h, _JmapClientHandler)]:
        logger.removeHandler(previous)
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    logger.propagate = False
    return handler
