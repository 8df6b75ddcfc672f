"""Defines lifecycle hooks for pipeline execution.

Observers are notified of walker events. They cannot change the course of a run: the only things
that stop a pipeline are binding errors, cancellation and failures returned by operations.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

from funcpipe.binding import BoundStep
from funcpipe.items import Item

if TYPE_CHECKING:
    from funcpipe.execution import ExecutionResult, StepTrace


class PipelineObserver(Protocol):
    """Observer protocol for pipeline execution lifecycle events."""

    def on_pipeline_start(self, items: Sequence[Item]) -> None:
        """Called before the first step, with the whole pipeline."""
        ...

    def on_step_start(self, step: BoundStep) -> None:
        """Called after an operation has been bound and right before it is invoked."""
        ...

    def on_step_finish(self, step: BoundStep, trace: "StepTrace") -> None:
        """Called after an operation returned, whatever it returned."""
        ...

    def on_error(self, error: Any, position: int | None) -> None:
        """Called once with the error that stops the pipeline.

        Args:
            error: A `PipelineException`, or the failure indicator returned by an operation.
            position: Index of the item where the error happened, if known.
        """
        ...

    def on_pipeline_finish(self, result: "ExecutionResult") -> None:
        """Called when the walk is over, successfully or not."""
        ...


class IgnoreAllObserver:
    """A pipeline observer that does nothing.

    Useful as a base class for observers interested in a few events only.
    """

    def on_pipeline_start(self, items: Sequence[Item]) -> None:
        pass

    def on_step_start(self, step: BoundStep) -> None:
        pass

    def on_step_finish(self, step: BoundStep, trace: "StepTrace") -> None:
        pass

    def on_error(self, error: Any, position: int | None) -> None:
        pass

    def on_pipeline_finish(self, result: "ExecutionResult") -> None:
        pass
