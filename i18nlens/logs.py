"""Structured logging setup for hosts embedding i18nlens.

Library modules only call `structlog.get_logger()`; the host calls
`configure_logging` once at startup. Output goes to stderr because stdout is
usually owned by the editor transport.
"""

from __future__ import annotations

import logging
import sys

import structlog
from structlog.stdlib import BoundLogger


def configure_logging(level: str = "INFO", *, json_output: bool = False) -> BoundLogger:
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
        force=True,
    )
    return structlog.stdlib.get_logger()
