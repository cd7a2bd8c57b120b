"""
Structured logging configuration using structlog.

- Key-value or JSON output
- Account numbers masked before rendering
- Library modules only emit events; the CLI decides level and format
"""

import logging
import sys
from typing import Any, cast

import structlog
from structlog.types import EventDict, Processor

# Event keys that may hold a full account number
MASKED_KEYS = ("iban", "value", "attempted_value")


def mask_iban(value: str) -> str:
    """Mask an account number, keeping the country code and last 4 characters.

    >>> mask_iban("NL91ABNA0417164300")
    'NL************4300'
    """
    if len(value) <= 6:
        return "*" * len(value)
    return value[:2] + "*" * (len(value) - 6) + value[-4:]


def mask_account_numbers(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Mask account numbers in log entries.

    Bank account numbers are personal data and must not reach log files in clear.
    """
    for key in MASKED_KEYS:
        value = event_dict.get(key)
        if isinstance(value, str):
            event_dict[key] = mask_iban(value)
    return event_dict


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add application context to every log entry."""
    from openiban import __version__

    event_dict["app"] = "openiban"
    event_dict["version"] = __version__
    return event_dict


def configure_structlog(json_logs: bool = False, dev_mode: bool = False) -> None:
    """
    Route structlog through the standard library logging module.

    Level filtering is left to stdlib logging. Called by :func:`configure_logging`
    (the command line), never at import time.
    """
    shared_processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        add_app_context,
        mask_account_numbers,
    ]

    if json_logs:
        # Production: JSON output for log aggregation
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    elif dev_mode:
        processors = shared_processors + [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        processors = shared_processors + [
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["timestamp", "level", "event"]),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Reconfiguration (e.g. --json-logs) must reach loggers already in use
        cache_logger_on_first_use=False,
    )


def configure_logging(
    log_level: str = "WARNING",
    json_logs: bool = False,
    dev_mode: bool = False,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        json_logs: Whether to output JSON logs
        dev_mode: Whether to use colorful development output
    """
    configure_structlog(json_logs=json_logs, dev_mode=dev_mode)

    # Logs go to stderr so command output on stdout stays parseable
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
        force=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Usage:
        logger = get_logger(__name__)
        logger.info("iban_validated", country="NL")

    Events always go to the stdlib logger ``name``. The processor chain comes
    from whatever structlog configuration is active: the host application's,
    or the one installed by :func:`configure_logging`. Importing OpenIBAN
    never configures structlog.
    """
    return cast(
        structlog.stdlib.BoundLogger,
        structlog.wrap_logger(logging.getLogger(name), wrapper_class=structlog.stdlib.BoundLogger),
    )
