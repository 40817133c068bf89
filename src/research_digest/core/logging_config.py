"""Log output for research-digest.

The package logs through stdlib ``logging.getLogger(__name__)``; this
module hangs a structlog ``ProcessorFormatter`` on the root handler so
those records come out structured. ``ObservabilityConfig.json_logs``
picks the renderer: ``True`` for JSON lines, ``False`` for the console
renderer, ``None`` to choose JSON whenever stderr is not a terminal.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Optional

import structlog

if TYPE_CHECKING:
    from research_digest.core.config import ObservabilityConfig

PACKAGE_LOGGER = "research_digest"


def _pre_chain() -> list:
    """Processors applied to both structlog and stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]


def _renderer(json_logs: Optional[bool]):
    if json_logs is None:
        json_logs = not sys.stderr.isatty()
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(config: ObservabilityConfig) -> None:
    """Install a single stderr handler on the root logger and set levels."""
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(config.json_logs),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
