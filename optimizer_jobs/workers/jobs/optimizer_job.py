"""
Optimizer job.

Resolves an optimization routine and a trainable program by name, compiles
the program against a training set and stores the compiled configuration
with the routine's final metrics.

Reference resolution and option validation happen inside the job body, so
an unknown name or malformed options is recorded as a failed attempt like
any other routine error.

Dependencies: optimizer_jobs.core.registry, optimizer_jobs.workers.jobs.base_job
System role: Concrete job for out-of-band program optimization
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from optimizer_jobs.boundary.store.base import ResultStore
from optimizer_jobs.core.contracts import CompiledProgram, Optimizer
from optimizer_jobs.core.exceptions import ConfigurationError
from optimizer_jobs.core.registry import ComponentRegistry, optimizers, programs
from optimizer_jobs.models.job import ResultRecord
from optimizer_jobs.observability.log_utils import log_job_event
from optimizer_jobs.workers.jobs.base_job import BaseJob, JobOutput

logger = logging.getLogger(__name__)


class OptimizerJob(BaseJob):
    """Compile a registered program with a registered optimizer."""

    start_message = "Starting optimization"
    progress_message = "Optimizing... {progress}% complete"
    completion_message = "Optimization completed successfully"
    failure_message = "Optimization failed: {error}"

    def __init__(
        self,
        store: ResultStore,
        result_ttl: int | None = None,
        optimizer_registry: ComponentRegistry = optimizers,
        program_registry: ComponentRegistry = programs,
    ) -> None:
        """
        Initialize optimizer job.

        Args:
            store: Status/result store
            result_ttl: Lifetime of the result record in seconds
            optimizer_registry: Registry resolving optimizer references
            program_registry: Registry resolving program references
        """
        super().__init__(store, result_ttl=result_ttl)
        self.optimizers = optimizer_registry
        self.programs = program_registry

    def perform(
        self,
        job_id: str,
        optimizer_ref: str,
        program_ref: str,
        trainset: Sequence[Any],
        options: Mapping[str, Any] | None = None,
    ) -> ResultRecord:
        """
        Dispatch entry point.

        Args:
            job_id: Job identifier
            optimizer_ref: Registered optimizer key
            program_ref: Registered program key
            trainset: Ordered training examples, passed through unchanged
            options: Optimizer constructor keyword arguments

        Returns:
            ResultRecord: Stored success record

        Raises:
            Exception: The routine's failure, after it was recorded
        """
        return super().perform(job_id, optimizer_ref, program_ref, trainset, options)

    def run(
        self,
        job_id: str,
        optimizer_ref: str,
        program_ref: str,
        trainset: Sequence[Any],
        options: Mapping[str, Any] | None = None,
    ) -> JobOutput:
        options = _validate_options(options)
        _validate_trainset(trainset)

        optimizer: Optimizer = self.optimizers.resolve(optimizer_ref)(**options)
        program = self.programs.resolve(program_ref)()

        log_job_event(
            logger,
            logging.INFO,
            job_id,
            f"{__name__}:run - Compiling program",
            optimizer=optimizer_ref,
            program=program_ref,
            trainset=trainset,
        )

        compiled: CompiledProgram = optimizer.compile(
            program,
            trainset=trainset,
            progress_callback=self.progress_callback(job_id),
        )

        metrics = getattr(optimizer, "final_metrics", None)
        if metrics is None:
            metrics = {}
        elif not isinstance(metrics, Mapping):
            raise TypeError(
                f"{type(optimizer).__name__}.final_metrics must be a mapping, "
                f"got {type(metrics).__name__}"
            )

        return JobOutput(payload=compiled.to_config(), metrics=dict(metrics))


def _validate_options(options: Any) -> dict[str, Any]:
    if options is None:
        return {}
    if not isinstance(options, Mapping):
        raise ConfigurationError(
            f"Optimizer options must be a mapping, got {type(options).__name__}",
            field="options",
        )
    bad_keys = [key for key in options if not isinstance(key, str)]
    if bad_keys:
        raise ConfigurationError(
            "Optimizer option names must be strings",
            field="options",
            details={"keys": [repr(key) for key in bad_keys]},
        )
    return dict(options)


def _validate_trainset(trainset: Any) -> None:
    if isinstance(trainset, (str, bytes)) or not isinstance(trainset, Sequence):
        raise ConfigurationError(
            f"Trainset must be a sequence of examples, got {type(trainset).__name__}",
            field="trainset",
        )
