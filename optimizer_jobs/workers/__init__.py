"""
Celery workers module.

Async task processing for long-running optimization jobs.

Dependencies: celery, optimizer_jobs.configs
System role: Background task processing
"""

from celery import Celery
from celery.signals import setup_logging

from optimizer_jobs.configs import get_settings
from optimizer_jobs.observability.logger import configure_logging

settings = get_settings()
celery_config = settings.celery

celery_app = Celery(
    "optimizer_jobs",
    broker=celery_config.broker_url,
    backend=celery_config.result_backend_url,
    include=["optimizer_jobs.workers.tasks.optimization"],
)

celery_app.conf.update(
    task_serializer=celery_config.task_serializer,
    result_serializer=celery_config.result_serializer,
    accept_content=celery_config.accept_content,
    timezone=celery_config.timezone,
    task_max_retries=celery_config.task_max_retries,
)


@setup_logging.connect
def _configure_worker_logging(**kwargs) -> None:
    """Use the application log format in worker processes."""
    configure_logging(settings.log_level)
