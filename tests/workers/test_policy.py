"""
Test suite for job policies and the optimization task.

Tests JobPolicy validation, the optimize_program task options, direct task
execution against an in-memory store, and enqueueing.

System role: Verification of queue/retry registration
"""

from unittest.mock import MagicMock, patch

import pytest
from celery import Celery

from optimizer_jobs.configs.celery_config import CelerySettings
from optimizer_jobs.core.exceptions import JobExecutionError
from optimizer_jobs.core.registry import optimizers, programs
from optimizer_jobs.models.job import JobStatus
from optimizer_jobs.workers.jobs.base_job import BaseJob, JobOutput
from optimizer_jobs.workers.policy import JobPolicy, register_job
from optimizer_jobs.workers.tasks.optimization import (
    OPTIMIZER_JOB_POLICY,
    enqueue_optimization,
    optimize_program,
    optimizer_job_policy,
)

from conftest import CompiledProgramStub, MathProgram

TASK_PATH = "optimizer_jobs.workers.tasks.optimization.optimize_program"


class TestJobPolicy:
    """Test suite for JobPolicy."""

    def test_task_options(self) -> None:
        policy = JobPolicy(queue="low", max_retries=1)

        assert policy.task_options() == {
            "queue": "low",
            "max_retries": 1,
            "autoretry_for": (Exception,),
            "retry_backoff": 60,
            "retry_backoff_max": 600,
        }

    def test_should_reject_empty_queue(self) -> None:
        with pytest.raises(ValueError, match="queue"):
            JobPolicy(queue="", max_retries=1)

    def test_should_reject_negative_retries(self) -> None:
        with pytest.raises(ValueError, match="max_retries"):
            JobPolicy(queue="low", max_retries=-1)

    def test_should_be_immutable(self) -> None:
        policy = JobPolicy(queue="low", max_retries=1)

        with pytest.raises(AttributeError):
            policy.queue = "high"

    def test_optimizer_policy_from_settings(self) -> None:
        settings = MagicMock()
        settings.celery = CelerySettings(low_priority_queue="batch", optimizer_max_retries=0)

        policy = optimizer_job_policy(settings)

        assert policy.queue == "batch"
        assert policy.max_retries == 0


class TestOptimizeProgramTask:
    """Test suite for the registered Celery task."""

    def test_task_should_use_low_queue_with_one_retry(self) -> None:
        assert OPTIMIZER_JOB_POLICY.queue == "low"
        assert OPTIMIZER_JOB_POLICY.max_retries == 1
        assert optimize_program.name == "optimizer_jobs.optimize_program"
        assert optimize_program.queue == "low"
        assert optimize_program.max_retries == 1

    @pytest.fixture
    def registered(self):
        """Register a fixed optimizer and program in the module registries."""

        class IdentityOptimizer:
            final_metrics = None

            def compile(self, program, trainset, progress_callback):
                progress_callback(50)
                self.final_metrics = {"accuracy": 1.0}
                return CompiledProgramStub({"rule": "identity"})

        class FailingOptimizer:
            def compile(self, program, trainset, progress_callback):
                raise JobExecutionError("model unavailable", error_kind="BackendError")

        optimizers.register("test_identity", IdentityOptimizer, replace=True)
        optimizers.register("test_failing", FailingOptimizer, replace=True)
        programs.register("test_math_qa", MathProgram, replace=True)
        yield
        optimizers.unregister("test_identity")
        optimizers.unregister("test_failing")
        programs.unregister("test_math_qa")

    @pytest.fixture
    def task_store(self, memory_store):
        """Route the task's store lookup to the in-memory store."""
        settings = MagicMock()
        settings.result_store.result_ttl_seconds = 3600
        with patch(
            "optimizer_jobs.workers.policy.get_result_store", return_value=memory_store
        ), patch("optimizer_jobs.workers.policy.get_settings", return_value=settings):
            yield memory_store

    def test_task_should_run_job_and_return_result(
        self, registered, task_store, trainset, job_id
    ) -> None:
        result = optimize_program(job_id, "test_identity", "test_math_qa", trainset, {})

        assert result["success"] is True
        assert result["payload"] == {"rule": "identity"}
        assert result["metrics"] == {"accuracy": 1.0}
        assert result["ttl"] == 3600
        assert task_store.read_status(job_id).status == JobStatus.COMPLETED

    def test_task_should_record_failure_and_reraise(
        self, registered, task_store, trainset, job_id
    ) -> None:
        """Test the original exception reaches Celery after the failure is stored."""
        with pytest.raises(JobExecutionError, match="model unavailable"):
            optimize_program(job_id, "test_failing", "test_math_qa", trainset, {})

        result = task_store.read_result(job_id)
        assert result.success is False
        assert result.error_kind == "BackendError"
        assert task_store.read_status(job_id).status == JobStatus.FAILED


class TestEnqueueOptimization:
    """Test suite for enqueue_optimization."""

    def test_should_submit_to_low_queue(self, trainset) -> None:
        with patch(TASK_PATH) as mock_task:
            job_id = enqueue_optimization(
                "bootstrap", "math_qa", trainset, {"max_demos": 2}, job_id="job-123"
            )

        assert job_id == "job-123"
        mock_task.apply_async.assert_called_once_with(
            args=("job-123", "bootstrap", "math_qa", trainset, {"max_demos": 2}),
            queue="low",
        )

    def test_should_generate_job_id(self, trainset) -> None:
        with patch(TASK_PATH) as mock_task:
            first = enqueue_optimization("bootstrap", "math_qa", trainset)
            second = enqueue_optimization("bootstrap", "math_qa", trainset)

        assert first != second
        assert mock_task.apply_async.call_args.kwargs["args"][0] == second
        assert mock_task.apply_async.call_args.kwargs["args"][4] == {}


class TestRegisterJob:
    """Test suite for register_job on a standalone app."""

    def test_should_bind_policy_and_store_factory(self, memory_store, job_id) -> None:
        app = Celery("register-job-test")

        class EchoJob(BaseJob):
            """Echo job."""

            def run(self, job_id, value):
                return JobOutput(payload={"value": value}, metrics={})

        task = register_job(
            app,
            EchoJob,
            JobPolicy(queue="batch", max_retries=0),
            name="tests.echo",
            store_factory=lambda: memory_store,
        )

        result = task(job_id, 7)

        assert task.name == "tests.echo"
        assert task.queue == "batch"
        assert task.max_retries == 0
        assert result["payload"] == {"value": 7}
        assert memory_store.read_status(job_id).status == JobStatus.COMPLETED
