"""
Per-job-type scheduling policy and Celery task registration.

Job classes carry no queue or retry annotations. Each job type is paired
with a JobPolicy when it is registered with the Celery app, and the policy
becomes the task's options.

Dependencies: celery, optimizer_jobs.boundary.store, optimizer_jobs.configs
System role: Binding job envelopes to the queue transport
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable

from celery import Celery

from optimizer_jobs.boundary.store.base import ResultStore
from optimizer_jobs.boundary.store.store_factory import get_result_store
from optimizer_jobs.configs import get_settings
from optimizer_jobs.workers.jobs.base_job import BaseJob

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JobPolicy:
    """
    Scheduling policy consumed by the dispatcher.

    Attributes:
        queue: Broker queue the job is routed to
        max_retries: Re-attempts after a failed attempt
        retry_backoff: Base backoff in seconds (exponential)
        retry_backoff_max: Upper bound on backoff in seconds
        autoretry_for: Exception types that trigger a re-attempt
    """

    queue: str
    max_retries: int
    retry_backoff: int = 60
    retry_backoff_max: int = 600
    autoretry_for: tuple[type[BaseException], ...] = (Exception,)

    def __post_init__(self) -> None:
        if not self.queue:
            raise ValueError("JobPolicy.queue must be a non-empty queue name")
        if self.max_retries < 0:
            raise ValueError("JobPolicy.max_retries must be >= 0")

    def task_options(self) -> dict[str, Any]:
        return {
            "queue": self.queue,
            "max_retries": self.max_retries,
            "autoretry_for": self.autoretry_for,
            "retry_backoff": self.retry_backoff,
            "retry_backoff_max": self.retry_backoff_max,
        }


def register_job(
    app: Celery,
    job_cls: type[BaseJob],
    policy: JobPolicy,
    name: str,
    store_factory: Callable[[], ResultStore] | None = None,
):
    """
    Register a job type as a Celery task under the given policy.

    Each attempt gets a fresh job instance backed by the configured result
    store. A failed attempt has already been recorded when its exception
    reaches Celery, which then applies the policy's retry rules.

    Args:
        app: Celery application
        job_cls: BaseJob subclass to run
        policy: Queue and retry policy for this job type
        name: Task name
        store_factory: Store provider called per attempt (defaults to get_result_store)

    Returns:
        celery.Task: Registered task whose arguments are ``perform``'s arguments
    """

    def run_job(task, job_id: str, *args: Any, **kwargs: Any) -> dict:
        logger.info(
            f"{__name__}:run_job - Attempt {task.request.retries + 1} of {policy.max_retries + 1}",
            extra={"job_id": job_id, "task_name": name},
        )
        job = job_cls(
            store=(store_factory or get_result_store)(),
            result_ttl=get_settings().result_store.result_ttl_seconds,
        )
        record = job.perform(job_id, *args, **kwargs)
        return record.model_dump(mode="json")

    run_job.__name__ = name.rsplit(".", 1)[-1]
    run_job.__doc__ = job_cls.__doc__

    logger.debug(
        f"{__name__}:register_job - Registering {job_cls.__name__} as {name}",
        extra={"queue": policy.queue, "max_retries": policy.max_retries},
    )
    return app.task(bind=True, name=name, **policy.task_options())(run_job)
