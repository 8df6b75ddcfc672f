"""Defines the pipeline walker and the execution engine."""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from enum import Enum
import time
from typing import Annotated, Any, final

from loguru import logger

from funcpipe.binding import BoundStep, bind
from funcpipe.cancellation import NEVER_CANCELLED, CancellationSignal, check_cancelled
from funcpipe.errors import CancellationError, PipelineException, SequenceError
from funcpipe.items import Item, Operation, is_operation
from funcpipe.lifecycle import PipelineObserver
from funcpipe.typecheck import type_name


class PipelineStatus(Enum):
    """Final status of a pipeline run."""

    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


@dataclass
class StepTrace:
    """Trace information for a single operation invocation."""

    name: Annotated[str, "The name of the operation."]
    position: Annotated[int, "Index of the operation in the pipeline."]
    args: Annotated[tuple[Any, ...], "The arguments the operation was invoked with."]
    duration: Annotated[float, "Duration of the invocation in seconds."]
    error: Annotated[Any | None, "The failure indicator returned by the operation, if any."]


@dataclass
class ExecutionResult:
    """Result of a pipeline run."""

    status: Annotated[PipelineStatus, "Final status of the pipeline."]
    traces: Annotated[list[StepTrace], "Traces of the invoked operations, in order."]
    error: Annotated[Any | None, "The error that stopped the pipeline, if any."] = None

    @property
    def invoked(self) -> list[str]:
        """Names of the invoked operations, in invocation order."""
        return [trace.name for trace in self.traces]

    def total_duration(self) -> float:
        """Calculate the time spent inside operations."""
        return sum(trace.duration for trace in self.traces)

    def succeeded(self) -> bool:
        """Check if every item was processed without errors."""
        return self.status == PipelineStatus.COMPLETED and self.error is None


def walk(
    items: Sequence[Item], signal: CancellationSignal = NEVER_CANCELLED
) -> Iterator[BoundStep]:
    """Walk a pipeline, yielding each operation with its bound arguments.

    The cancellation signal is checked before each step, and the next step is only bound once the
    consumer asks for it, so operations invoked by the consumer run between checks.

    Raises:
        CancellationError: If the signal fired before a step.
        SequenceError: If a value is found where an operation is expected.
        ArityError: If an operation is not followed by enough values.
        TypeMismatchError: If a value does not match its declared parameter type.
        SignatureError: If an operation cannot be described.
    """
    cursor = 0
    while cursor < len(items):
        cancelled = check_cancelled(signal, cursor)
        if cancelled is not None:
            raise cancelled

        item = items[cursor]
        if not is_operation(item):
            raise SequenceError(
                f"invalid sequence: callable expected at position {cursor}, "
                f"got {type_name(item)}",
                cursor,
            )

        step = bind(Operation.from_callable(item), items, cursor)
        yield step
        cursor = step.next_cursor


def plan_pipeline(*items: Item) -> list[BoundStep]:
    """Bind every operation of a pipeline without invoking any of them.

    Raises:
        PipelineException: The first binding error found.
    """
    return list(walk(items))


@final
class PipelineExecutor:
    """Runs pipelines of operations and values, one step at a time.

    Args:
        observers: Observers notified of lifecycle events.
    """

    def __init__(self, observers: Sequence[PipelineObserver] | None = None) -> None:
        self._observers = list(observers or [])

    def execute(
        self,
        items: Sequence[Item],
        signal: CancellationSignal = NEVER_CANCELLED,
    ) -> ExecutionResult:
        """Execute a pipeline.

        Operations are invoked left to right with the values bound to them. The run stops at the
        first binding error, at cancellation, or when an operation returns something other than
        `None`. Exceptions raised by operations propagate to the caller.

        Args:
            items: The pipeline.
            signal: Cancellation signal checked before each step.

        Returns:
            Result object with the final status, traces and the error that stopped the run.
        """
        logger.debug("Starting pipeline of {count} items", count=len(items))
        self._notify("on_pipeline_start", items)

        traces: list[StepTrace] = []
        status = PipelineStatus.COMPLETED
        error: Any | None = None
        steps = walk(items, signal)
        while True:
            try:
                step = next(steps, None)
            except CancellationError as e:
                status, error = PipelineStatus.CANCELLED, e
                self._fail(e, e.position)
                break
            except PipelineException as e:
                status, error = PipelineStatus.FAILED, e
                self._fail(e, e.position)
                break
            if step is None:
                break

            trace = self._invoke(step)
            traces.append(trace)
            if trace.error is not None:
                status, error = PipelineStatus.FAILED, trace.error
                self._fail(trace.error, step.position)
                break

        result = ExecutionResult(status=status, traces=traces, error=error)
        if result.succeeded():
            logger.debug("Pipeline finished: {count} operations invoked", count=len(traces))
        self._notify("on_pipeline_finish", result)
        return result

    def _invoke(self, step: BoundStep) -> StepTrace:
        name = step.operation.name
        with logger.contextualize(operation=name, position=step.position):
            logger.debug(f"Invoking {name} with {len(step.args)} arguments")
            self._notify("on_step_start", step)

            start_time = time.perf_counter()
            try:
                outcome = step.operation(*step.args)
            except Exception as e:
                logger.warning(f"{name} raised {type_name(e)}: {e}")
                self._notify("on_error", e, step.position)
                raise
            duration = time.perf_counter() - start_time

        trace = StepTrace(
            name=name, position=step.position, args=step.args, duration=duration, error=outcome
        )
        self._notify("on_step_finish", step, trace)
        return trace

    def _fail(self, error: Any, position: int | None) -> None:
        logger.warning(f"Pipeline stopped at position {position}: {error}")
        self._notify("on_error", error, position)

    def _notify(self, event: str, *args: Any) -> None:
        for observer in self._observers:
            try:
                getattr(observer, event)(*args)
            except Exception:
                logger.exception(f"Observer {observer!r} failed while handling {event}")


def run_pipeline_with_cancellation(signal: CancellationSignal, *items: Item) -> Any | None:
    """Run a pipeline, checking `signal` before each step.

    Returns:
        None if every item was processed, otherwise the first error: a `PipelineException`, or
        the failure indicator returned by an operation, unchanged.
    """
    return PipelineExecutor().execute(items, signal).error


def run_pipeline(*items: Item) -> Any | None:
    """Run a pipeline that cannot be cancelled.

    Each operation is followed by the values it takes, for example::

        run_pipeline(setup, copy, "in.txt", "out.txt", report)

    Returns:
        None if every item was processed, otherwise the first error.
    """
    return run_pipeline_with_cancellation(NEVER_CANCELLED, *items)
