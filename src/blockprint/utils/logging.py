"""structlog configuration for blockprint.

Events go to stderr, never stdout, because ``blockprint chunk`` may write
block JSONL to stdout.
"""

import logging
import sys

import structlog


def _processors(json_logs: bool) -> list:
    shared = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_logs:
        # tracebacks become nested dicts so every event stays one JSON line
        return shared + [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return shared + [
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.dev.ConsoleRenderer(),
    ]


def setup_logging(verbose: bool = False, json_logs: bool = False) -> None:
    """Configure structlog. ``verbose`` enables per-resource debug events."""
    structlog.configure(
        processors=_processors(json_logs),
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG if verbose else logging.INFO),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str, **context) -> structlog.stdlib.BoundLogger:
    """Named logger; keyword arguments are bound to every event it emits."""
    log = structlog.get_logger(name)
    return log.bind(**context) if context else log
