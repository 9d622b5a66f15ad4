"""
Shared test fixtures and configuration for entire test suite.

Provides: simulated clock, in-memory result store, isolated registries,
scripted optimizer/program doubles
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

import uuid
from typing import Any, Callable

import pytest

from optimizer_jobs.boundary.store.memory_store import InMemoryResultStore
from optimizer_jobs.core.registry import ComponentRegistry


class FakeClock:
    """Manually advanced seconds source for TTL tests."""

    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class CompiledProgramStub:
    """Compiled artifact exposing a fixed configuration."""

    def __init__(self, config: Any) -> None:
        self.config = config

    def to_config(self) -> Any:
        return self.config


class ScriptedOptimizer:
    """
    Optimizer double.

    Reports the scripted progress values, optionally calling ``observer``
    after each report, then returns a fixed config or raises ``error``.
    """

    def __init__(
        self,
        progress_steps: tuple[int, ...] = (),
        payload: Any = None,
        metrics: dict | None = None,
        error: Exception | None = None,
        observer: Callable[[], None] | None = None,
        **options: Any,
    ) -> None:
        self.progress_steps = progress_steps
        self.payload = payload
        self.metrics = metrics
        self.error = error
        self.observer = observer
        self.options = options
        self.final_metrics = None
        self.compiled_with: dict[str, Any] = {}

    def compile(self, program, trainset, progress_callback):
        self.compiled_with = {"program": program, "trainset": trainset}
        for step in self.progress_steps:
            progress_callback(step)
            if self.observer is not None:
                self.observer()
        if self.error is not None:
            raise self.error
        self.final_metrics = self.metrics
        return CompiledProgramStub(self.payload)


class MathProgram:
    """Trainable program double."""


@pytest.fixture
def clock() -> FakeClock:
    """Provide a simulated clock."""
    return FakeClock()


@pytest.fixture
def memory_store(clock: FakeClock) -> InMemoryResultStore:
    """Provide an in-memory store driven by the simulated clock."""
    return InMemoryResultStore(clock=clock)


@pytest.fixture
def job_id() -> str:
    """Provide a fresh job identifier."""
    return uuid.uuid4().hex


@pytest.fixture
def optimizer_registry() -> ComponentRegistry:
    """Provide an empty optimizer registry isolated from the module-level one."""
    return ComponentRegistry("optimizer")


@pytest.fixture
def program_registry() -> ComponentRegistry:
    """Provide a program registry with ``math_qa`` registered."""
    registry = ComponentRegistry("program")
    registry.register("math_qa", MathProgram)
    return registry


@pytest.fixture
def trainset() -> list[dict]:
    """Provide a one-example training set."""
    return [{"problem": "2+2", "answer": 4}]


@pytest.fixture
def scripted_optimizer(optimizer_registry: ComponentRegistry):
    """
    Install a ScriptedOptimizer under the ``scripted`` key.

    Returns:
        Callable: ``install(**script)`` registering the script and returning
        the list of optimizer instances the job creates
    """

    def install(**script: Any) -> list[ScriptedOptimizer]:
        created: list[ScriptedOptimizer] = []

        def factory(**options: Any) -> ScriptedOptimizer:
            instance = ScriptedOptimizer(**script, **options)
            created.append(instance)
            return instance

        optimizer_registry.register("scripted", factory, replace=True)
        return created

    return install
