from funcpipe.binding import BoundStep, bind
from funcpipe.cancellation import NEVER_CANCELLED, CancellationSignal, CancellationToken
from funcpipe.errors import (
    ArityError,
    CancellationError,
    DeadlineExceededError,
    PipelineException,
    SequenceError,
    SignatureError,
    TypeMismatchError,
)
from funcpipe.execution import (
    ExecutionResult,
    PipelineExecutor,
    PipelineStatus,
    StepTrace,
    plan_pipeline,
    run_pipeline,
    run_pipeline_with_cancellation,
    walk,
)
from funcpipe.items import Item, Operation, Value, is_operation
from funcpipe.lifecycle import IgnoreAllObserver, PipelineObserver
from funcpipe.typecheck import is_assignable

__all__ = [
    # Entry points
    "run_pipeline",
    "run_pipeline_with_cancellation",
    "plan_pipeline",
    # Core types
    "Item",
    "Operation",
    "Value",
    "BoundStep",
    "is_operation",
    "is_assignable",
    "bind",
    "walk",
    # Execution
    "PipelineExecutor",
    "ExecutionResult",
    "PipelineStatus",
    "StepTrace",
    # Cancellation
    "CancellationSignal",
    "CancellationToken",
    "NEVER_CANCELLED",
    # Lifecycle
    "PipelineObserver",
    "IgnoreAllObserver",
    # Errors
    "PipelineException",
    "SequenceError",
    "ArityError",
    "TypeMismatchError",
    "SignatureError",
    "CancellationError",
    "DeadlineExceededError",
]
