"""structlog setup for homestaff.

Everything goes to stderr so stdout stays clean for ``--json`` results.
Human mode uses the console renderer; ``--log-json`` emits one JSON object
per line. Stdlib loggers (``logging.getLogger(__name__)`` in services and
infrastructure) are routed through the same processor chain.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

# Third-party loggers that never go below WARNING, even with --verbose.
QUIET_LIBRARIES = ("sqlalchemy", "mcp", "pluggy")

SECRET_KEYS = frozenset({"password", "password_hash", "token", "session_token"})
REDACTED = "***"


def redact_secrets(
    _logger: Any, _method: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Mask credential fields bound onto a log event."""
    for key in SECRET_KEYS.intersection(event_dict):
        if event_dict[key]:
            event_dict[key] = REDACTED
    return event_dict


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install the stderr handler and structlog processor chain.

    Args:
        verbose: DEBUG for ``homestaff.*`` loggers; otherwise WARNING.
        log_json: JSON lines instead of the console renderer.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_secrets,
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("homestaff").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)
