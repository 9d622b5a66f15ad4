"""
Structured logging helpers for job events.

Job arguments and outputs (trainsets, compiled configs, metrics) can be
arbitrarily large. Values passed as log context are reduced to short
summaries before they reach the log record's ``extra`` fields.

Dependencies: logging (stdlib), pydantic
System role: Bounded structured logging for workers
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel

MAX_VALUE_LENGTH = 200
MAX_KEYS_SHOWN = 5


def summarize(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Reduce a value to a short loggable string.

    Mappings and pydantic models show their first keys, other sequences
    their type and length. Anything longer than ``max_length`` is cut.

    Args:
        value: Value to summarize
        max_length: Maximum length before truncating

    Returns:
        str: Summary safe to attach to a log record
    """
    if value is None:
        return "None"
    if isinstance(value, BaseModel):
        value = dict(value)
    if isinstance(value, Mapping):
        keys = [str(key) for key in list(value)[:MAX_KEYS_SHOWN]]
        hidden = len(value) - len(keys)
        text = "{" + ", ".join(keys) + (f", +{hidden} more" if hidden > 0 else "") + "}"
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        text = f"{type(value).__name__}[{len(value)}]"
    else:
        try:
            text = str(value)
        except Exception as e:
            return f"<unrepresentable {type(value).__name__}: {type(e).__name__}>"

    if len(text) > max_length:
        return f"{text[:max_length]}... ({len(text)} chars)"
    return text


def job_extra(job_id: str, **context: Any) -> dict[str, str]:
    """Build ``extra`` for a job log record with every value summarized."""
    extra = {key: summarize(val) for key, val in context.items()}
    extra["job_id"] = job_id
    return extra


def log_job_event(
    logger: logging.Logger,
    level: int,
    job_id: str,
    event: str,
    **context: Any,
) -> None:
    """
    Log a lifecycle event for one job.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        job_id: Job the event belongs to
        event: Log message
        **context: Additional fields, summarized
    """
    logger.log(level, event, extra=job_extra(job_id, **context))


def log_job_failure(
    logger: logging.Logger,
    job_id: str,
    event: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """Log a failed attempt with its traceback, error type and message."""
    extra = job_extra(job_id, **context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = summarize(str(exc))
    logger.error(event, exc_info=exc, extra=extra)
