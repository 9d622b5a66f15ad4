"""
Program optimization Celery task.

Task: optimize_program(job_id, optimizer_ref, program_ref, trainset, options)
Flow: running status -> optimizer.compile (progress updates) -> result + terminal status

Optimization jobs run on the low-priority queue with at most one re-attempt,
so they never crowd out interactive work.

Dependencies: celery, optimizer_jobs.workers
System role: Async program optimization task
"""

import logging
import uuid
from typing import Any, Mapping, Sequence

from optimizer_jobs.configs import Settings, get_settings
from optimizer_jobs.workers import celery_app
from optimizer_jobs.workers.jobs.optimizer_job import OptimizerJob
from optimizer_jobs.workers.policy import JobPolicy, register_job

logger = logging.getLogger(__name__)


def optimizer_job_policy(settings: Settings | None = None) -> JobPolicy:
    """
    Build the optimizer job policy from Celery settings.

    Returns:
        JobPolicy: Low-priority queue, one re-attempt by default
    """
    celery = (settings or get_settings()).celery
    return JobPolicy(
        queue=celery.low_priority_queue,
        max_retries=celery.optimizer_max_retries,
        retry_backoff=celery.task_retry_backoff,
        retry_backoff_max=celery.task_retry_backoff_max,
    )


OPTIMIZER_JOB_POLICY = optimizer_job_policy()

optimize_program = register_job(
    celery_app,
    OptimizerJob,
    OPTIMIZER_JOB_POLICY,
    name="optimizer_jobs.optimize_program",
)


def enqueue_optimization(
    optimizer_ref: str,
    program_ref: str,
    trainset: Sequence[Any],
    options: Mapping[str, Any] | None = None,
    job_id: str | None = None,
) -> str:
    """
    Submit an optimization job.

    Args:
        optimizer_ref: Registered optimizer key
        program_ref: Registered program key
        trainset: JSON-serializable training examples
        options: Optimizer keyword arguments
        job_id: Identifier to use; a new one is generated when omitted

    Returns:
        str: Job identifier for polling status and result
    """
    job_id = job_id or uuid.uuid4().hex
    optimize_program.apply_async(
        args=(job_id, optimizer_ref, program_ref, list(trainset), dict(options or {})),
        queue=OPTIMIZER_JOB_POLICY.queue,
    )
    logger.info(
        f"{__name__}:enqueue_optimization - Job enqueued",
        extra={"job_id": job_id, "queue": OPTIMIZER_JOB_POLICY.queue},
    )
    return job_id
