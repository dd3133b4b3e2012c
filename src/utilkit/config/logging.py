"""Structured logging for utilkit.

Helpers log through :func:`get_logger`: a structlog ``BoundLogger`` that
hands each event to the stdlib ``logging`` tree as ``msg`` plus ``extra``
fields.  Until :func:`configure_logging` runs, those records go wherever
the host application sends stdlib logs (by default, nowhere below WARNING).

:func:`configure_logging` installs a single stderr handler that renders
both these records and native structlog loggers:
- Human (default): console key=value output
- JSON: one JSON object per line
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

_HANDLER_FLAG = "_utilkit_handler"


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structured logger bound to the stdlib logger *name*.

    Works whether or not structlog has been configured; level filtering
    follows the stdlib logger.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.render_to_log_kwargs,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def _pre_chain() -> list[structlog.types.Processor]:
    # ExtraAdder lifts get_logger() fields back out of LogRecord.extra
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool, stream: TextIO) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=stream.isatty())


def _replace_handler(handler: logging.Handler) -> None:
    """Swap in *handler* for the one a previous call installed.

    Handlers added by the host application are left alone.
    """
    root = logging.getLogger()
    for existing in [h for h in root.handlers if getattr(h, _HANDLER_FLAG, False)]:
        root.removeHandler(existing)
    setattr(handler, _HANDLER_FLAG, True)
    root.addHandler(handler)


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route utilkit (and structlog-native) events to *stream*.

    Args:
        verbose: DEBUG for the ``utilkit`` logger tree; WARNING otherwise.
        log_json: Render JSON lines instead of console text.
        stream: Destination, ``sys.stderr`` when omitted.
    """
    stream = stream or sys.stderr
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json, stream),
            ],
        )
    )
    _replace_handler(handler)

    logging.getLogger("utilkit").setLevel(logging.DEBUG if verbose else logging.WARNING)
