"""Log output for numfield: structlog in front, stdlib handlers behind.

Log lines go to stderr (stdout carries results) as either
``ConsoleRenderer`` text or, with ``--log-json``, one JSON object per line.
Records from plain ``logging.getLogger("numfield....")`` calls pass through
the same pre-chain, so they also pick up the bound field policy.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from numfield.domain.types import SanitizationConfig

LOGGER_NAME = "numfield"

_PRE_CHAIN: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
)


def _build_handler(stream: IO[str], log_json: bool) -> logging.Handler:
    final: structlog.types.Processor
    if log_json:
        final = structlog.processors.JSONRenderer()
    else:
        final = structlog.dev.ConsoleRenderer(colors=stream.isatty())

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=list(_PRE_CHAIN),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, final],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: IO[str] | None = None,
) -> None:
    """Install the numfield log pipeline on the root logger.

    Calling it again swaps the handler instead of adding a second one.

    Args:
        verbose: DEBUG for the ``numfield`` logger tree instead of WARNING.
        log_json: JSON lines instead of console text.
        stream: Where to write; ``sys.stderr`` (looked up per call) if None.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers[:] = [_build_handler(stream or sys.stderr, log_json)]
    root.setLevel(logging.WARNING)
    logging.getLogger(LOGGER_NAME).setLevel(logging.DEBUG if verbose else logging.WARNING)


def bind_field_context(config: SanitizationConfig) -> None:
    """Attach the active field policy to every subsequent log line."""
    structlog.contextvars.bind_contextvars(
        decimal_separator=config.decimal_separator,
        allow_negative=config.allow_negative,
        max_decimals=config.max_decimals,
    )
