"""Error taxonomy for pipeline execution.

Every error detected by the executor itself derives from `PipelineException`. Failures returned by
the operations are not wrapped: they are surfaced exactly as the operation returned them.
"""


class PipelineException(Exception):
    """Base exception for pipeline errors.

    Args:
        message: Human readable description of the error.
        position: Index of the item at which the error was detected, if known.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        self.position = position
        super().__init__(message)


class SequenceError(PipelineException):
    """An operation was expected but the item at the position is a plain value.

    Also raised when a fixed parameter slot is occupied by another operation.
    """


class ArityError(PipelineException):
    """Fewer values follow an operation than its fixed parameters require."""

    def __init__(self, operation: str, expected: int, got: int, position: int | None = None) -> None:
        self.operation = operation
        self.expected = expected
        self.got = got
        super().__init__(
            f"not enough arguments for {operation}: expected {expected}, got {got}", position
        )


class TypeMismatchError(PipelineException):
    """A value is not assignable to the declared type of the slot it should fill."""

    def __init__(
        self,
        operation: str,
        argument: int,
        expected: str,
        actual: str,
        position: int | None = None,
    ) -> None:
        self.operation = operation
        self.argument = argument
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"invalid argument type for {operation} (argument {argument}): "
            f"expected {expected}, got {actual}",
            position,
        )


class SignatureError(PipelineException):
    """The parameters of a callable cannot be described or checked at run time."""


class CancellationError(PipelineException):
    """The cancellation signal fired before a step began."""

    def __init__(self, reason: str | None = None, position: int | None = None) -> None:
        self.reason = reason
        super().__init__(f"pipeline cancelled: {reason or 'cancellation requested'}", position)


class DeadlineExceededError(CancellationError):
    """The deadline of a cancellation token passed before a step began."""

    def __init__(self, position: int | None = None) -> None:
        super().__init__("deadline exceeded", position)
