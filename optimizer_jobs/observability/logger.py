"""
Logger configuration.

One stdout handler for the API process and the Celery workers. Records that
carry a ``job_id`` (see ``log_utils.job_extra``) get it appended to the
line so a single attempt can be followed through worker output.

Dependencies: logging (stdlib)
System role: Centralized logging configuration
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s%(job_tag)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"

# Libraries that log every broker/connection round-trip at INFO
NOISY_LOGGERS = ("kombu", "amqp", "redis", "celery.worker.strategy")


class JobTagFilter(logging.Filter):
    """Expose ``job_tag`` on every record: ``" [job=<id>]"`` or empty."""

    def filter(self, record: logging.LogRecord) -> bool:
        job_id = getattr(record, "job_id", None)
        record.job_tag = f" [job={job_id}]" if job_id else ""
        return True


def configure_logging(level: str | int = "INFO") -> None:
    """
    Replace root handlers with a single tagged stdout handler.

    Args:
        level: Root log level name or number; unknown names fall back to INFO
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(JobTagFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger.setLevel(level)
    root_logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger (usually ``get_logger(__name__)``)."""
    return logging.getLogger(name)
