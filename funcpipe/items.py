"""Pipeline items: operations and values.

A pipeline is a flat sequence where each item is either an operation or a value. Operations are
described by an `Operation`, which records how many values the operation takes and of which types.
Any other item is a value, and `Value` lets a callable object travel as a plain value.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
import functools
import inspect
from typing import Any

from funcpipe.errors import SignatureError
from funcpipe.typecheck import accepts_anything, describe_type

type Item = Any
"""Type alias for a pipeline item, an operation or a value."""


@dataclass(frozen=True)
class Value:
    """Marks an item as a plain value even when it is callable.

    Args:
        value: The wrapped object. It is unwrapped before type checking and invocation.
    """

    value: Any


def unwrap(item: Item) -> Any:
    """Return the object an item stands for, removing a `Value` wrapper if present."""
    return item.value if isinstance(item, Value) else item


def is_operation(item: Item) -> bool:
    """Check whether an item must be interpreted as an operation.

    Descriptors and callables are operations, except for classes, which are values.
    """
    if isinstance(item, Operation):
        return True
    return callable(item) and not isinstance(item, (type, Value))


def _callable_name(func: Callable[..., Any]) -> str:
    if isinstance(func, functools.partial):
        return _callable_name(func.func)
    return getattr(func, "__qualname__", None) or type(func).__qualname__


class Operation:
    """Descriptor of a pipeline operation.

    It carries the declared type of each fixed positional parameter, the element type of the trailing
    variadic parameter (if any) and the invocable itself. The operation returns `None` on success, and
    anything else is its failure indicator.

    Args:
        func: The invocable.
        parameters: Declared types of the fixed positional parameters, in order.
        variadic: Element type of the trailing variadic parameter, or `None` if there is none. Use
            `Any` for a variadic parameter that accepts anything.
        name: Display name. Defaults to the qualified name of `func`.
    """

    def __init__(
        self,
        func: Callable[..., Any],
        parameters: Sequence[Any] = (),
        variadic: Any | None = None,
        name: str | None = None,
    ) -> None:
        self.func = func
        self.parameters = tuple(parameters)
        self.variadic = variadic
        self.name = name or _callable_name(func)

    @classmethod
    def from_callable(cls, func: Callable[..., Any]) -> "Operation":
        """Describe a callable by inspecting its signature.

        Every positional parameter becomes a fixed slot, defaults notwithstanding, and `*args` becomes
        the variadic slot. Unannotated parameters accept any value.

        Raises:
            SignatureError: If the signature cannot be inspected or has a required keyword-only
                parameter.
        """
        if isinstance(func, Operation):
            return func

        name = _callable_name(func)
        try:
            signature = inspect.signature(func, eval_str=True)
        except (TypeError, ValueError, NameError, AttributeError) as e:
            raise SignatureError(f"cannot inspect the parameters of {name}: {e}") from e

        parameters: list[Any] = []
        variadic: Any | None = None
        for param in signature.parameters.values():
            if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
                parameters.append(_declared(param.annotation))
            elif param.kind == param.VAR_POSITIONAL:
                variadic = _declared(param.annotation)
            elif param.kind == param.KEYWORD_ONLY and param.default is param.empty:
                raise SignatureError(
                    f"{name} has a required keyword-only parameter '{param.name}' "
                    "that cannot be bound positionally"
                )

        return cls(func, parameters, variadic, name=name)

    @property
    def is_variadic(self) -> bool:
        return self.variadic is not None

    @property
    def fixed_count(self) -> int:
        """Number of fixed parameter slots."""
        return len(self.parameters)

    @property
    def arity(self) -> int:
        """Number of declared parameters, counting the variadic slot as one."""
        return self.fixed_count + (1 if self.is_variadic else 0)

    def __call__(self, *args: Any) -> Any:
        return self.func(*args)

    def __repr__(self) -> str:
        params = [describe_type(p) for p in self.parameters]
        if self.is_variadic:
            params.append(f"*{describe_type(self.variadic)}")
        return f"Operation(name={self.name}, parameters=[{', '.join(params)}])"


def _declared(annotation: Any) -> Any:
    return Any if accepts_anything(annotation) else annotation
