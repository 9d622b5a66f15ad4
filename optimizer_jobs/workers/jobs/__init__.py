"""Job types run by the Celery workers."""

from optimizer_jobs.workers.jobs.base_job import BaseJob, JobOutput, classify_error
from optimizer_jobs.workers.jobs.optimizer_job import OptimizerJob

__all__ = ["BaseJob", "JobOutput", "OptimizerJob", "classify_error"]
