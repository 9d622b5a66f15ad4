"""
Observability module.

Provides logging configuration and structured logging helpers.
"""

from optimizer_jobs.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
