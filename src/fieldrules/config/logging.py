"""structlog wiring for the ``fieldrules`` logger namespace.

fieldrules is embedded in other applications, so configuration touches
only the ``fieldrules`` logger: the host's root handlers and levels are
left alone. Output goes to stderr, console-rendered by default or as
JSON lines with ``log_json``.
"""

from __future__ import annotations

import logging
import sys

import structlog

from fieldrules.config.settings import FieldRulesSettings

LOGGER_NAME = "fieldrules"


class _RulesHandler(logging.StreamHandler):
    """Marker type so reconfiguration replaces only our own handler."""


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route ``fieldrules.*`` records through a structlog formatter.

    Args:
        verbose: Emit DEBUG records (rule failures, conversion faults).
            When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.ExtraAdder(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.UnicodeDecoder(),
    ]

    handler = _RulesHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    rules_logger = logging.getLogger(LOGGER_NAME)
    for existing in [h for h in rules_logger.handlers if isinstance(h, _RulesHandler)]:
        rules_logger.removeHandler(existing)
    rules_logger.addHandler(handler)
    rules_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    # Records are rendered here; the host's root handlers would duplicate them.
    rules_logger.propagate = False


def configure_from_settings(settings: FieldRulesSettings) -> None:
    """Apply the ``[logging]`` section of *settings*."""
    configure_logging(
        verbose=settings.logging.verbose,
        log_json=settings.logging.json_output,
    )
