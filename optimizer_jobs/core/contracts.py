"""
Structural contracts for pluggable optimization components.

The optimization routine and the trainable program are supplied by callers
and resolved by name; these protocols describe the surface the job layer
relies on.

Dependencies: typing
System role: Interface definitions for optimizer/program collaborators
"""

from typing import Any, Mapping, Protocol, Sequence, runtime_checkable


class ProgressCallback(Protocol):
    """Synchronous hook invoked by a routine with an integer percentage."""

    def __call__(self, progress: int) -> None: ...


@runtime_checkable
class CompiledProgram(Protocol):
    """Artifact returned by ``Optimizer.compile``."""

    def to_config(self) -> Any: ...


@runtime_checkable
class Optimizer(Protocol):
    """
    Optimization routine.

    ``compile`` may call ``progress_callback`` zero or more times; the
    callback only reports status and has no effect on the computation.
    ``final_metrics`` is read once after ``compile`` returns.
    """

    final_metrics: Mapping[str, Any] | None

    def compile(
        self,
        program: Any,
        trainset: Sequence[Any],
        progress_callback: ProgressCallback,
    ) -> CompiledProgram: ...
