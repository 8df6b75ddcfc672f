"""Argument binding for pipeline operations.

The binder looks at the values following an operation and groups the ones the operation takes
into its argument list, checking each against the declared parameter type.
"""

from collections.abc import Sequence
from typing import Any, NamedTuple

from funcpipe.errors import ArityError, SequenceError, TypeMismatchError
from funcpipe.items import Item, Operation, is_operation, unwrap
from funcpipe.typecheck import describe_type, is_assignable, type_name


class BoundStep(NamedTuple):
    """An operation together with the arguments bound to it.

    Args:
        operation: The operation to invoke.
        position: Index of the operation in the pipeline.
        args: Arguments to invoke the operation with.
        next_cursor: Index of the first item after the consumed values.
    """

    operation: Operation
    position: int
    args: tuple[Any, ...]
    next_cursor: int

    @property
    def consumed(self) -> int:
        """Number of values consumed from the pipeline."""
        return self.next_cursor - self.position - 1


def bind(operation: Operation, items: Sequence[Item], cursor: int) -> BoundStep:
    """Bind the values following the operation at `cursor`.

    Fixed slots must each be filled by a value of the declared type. A variadic slot then takes
    every following value assignable to its element type, stopping at the first one that is not (or
    at the next operation), which is left for the next step.

    Args:
        operation: Descriptor of the operation at `cursor`.
        items: The whole pipeline.
        cursor: Index of the operation.

    Returns:
        The bound step.

    Raises:
        ArityError: If the pipeline ends before every fixed slot is filled.
        SequenceError: If a fixed slot would be filled by another operation.
        TypeMismatchError: If a value does not match the type of its fixed slot.
    """
    args: list[Any] = []
    position = cursor + 1

    for index, expected in enumerate(operation.parameters):
        if position >= len(items):
            raise ArityError(operation.name, operation.fixed_count, len(args), cursor)

        candidate = items[position]
        if is_operation(candidate):
            raise SequenceError(
                f"{operation.name} expects a value for argument {index} "
                f"at position {position}, got a callable",
                position,
            )

        value = unwrap(candidate)
        if not is_assignable(value, expected):
            raise TypeMismatchError(
                operation.name, index, describe_type(expected), type_name(value), position
            )
        args.append(value)
        position += 1

    if operation.is_variadic:
        while position < len(items):
            candidate = items[position]
            if is_operation(candidate):
                break
            value = unwrap(candidate)
            if not is_assignable(value, operation.variadic):
                break
            args.append(value)
            position += 1

    return BoundStep(operation, cursor, tuple(args), position)
