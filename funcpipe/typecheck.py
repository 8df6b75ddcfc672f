"""Run-time assignability of values to declared parameter types.

A single rule is used everywhere: a value is assignable to a declared type when it is an instance
of it. Subclasses are accepted, but no implicit coercion happens, so an `int` is not accepted where a
`float` is declared. Generic aliases only check their origin class.
"""

import inspect
import types
from typing import Annotated, Any, Literal, NewType, TypeAliasType, TypeVar, Union, get_args, get_origin

from funcpipe.errors import SignatureError


def accepts_anything(annotation: Any) -> bool:
    """Check whether an annotation places no constraint on its values."""
    return annotation is inspect.Parameter.empty or annotation is Any or annotation is object


def is_assignable(value: Any, annotation: Any) -> bool:
    """Check whether `value` may be passed to a parameter declared as `annotation`.

    Args:
        value: The candidate argument.
        annotation: The declared parameter type. `inspect.Parameter.empty` means undeclared.

    Returns:
        True if the value is assignable to the declared type.

    Raises:
        SignatureError: If the annotation cannot be checked at run time.
    """
    if accepts_anything(annotation):
        return True
    if annotation is None or annotation is types.NoneType:
        return value is None
    if isinstance(annotation, TypeVar):
        if annotation.__bound__ is not None:
            return is_assignable(value, annotation.__bound__)
        if annotation.__constraints__:
            return any(is_assignable(value, c) for c in annotation.__constraints__)
        return True
    if isinstance(annotation, NewType):
        return is_assignable(value, annotation.__supertype__)
    if isinstance(annotation, TypeAliasType):
        return is_assignable(value, annotation.__value__)

    origin = get_origin(annotation)
    if origin is Annotated:
        return is_assignable(value, get_args(annotation)[0])
    if origin is Union or origin is types.UnionType:
        return any(is_assignable(value, arg) for arg in get_args(annotation))
    if origin is Literal:
        return any(type(value) is type(arg) and value == arg for arg in get_args(annotation))
    if origin is not None:
        annotation = origin

    if not isinstance(annotation, type):
        raise SignatureError(f"cannot check values against {describe_type(annotation)} at run time")
    try:
        return isinstance(value, annotation)
    except TypeError as e:
        raise SignatureError(
            f"cannot check values against {describe_type(annotation)} at run time: {e}"
        ) from e


def describe_type(annotation: Any) -> str:
    """Render a declared type for error messages."""
    if accepts_anything(annotation):
        return "Any"
    if annotation is None or annotation is types.NoneType:
        return "None"
    if isinstance(annotation, type) and get_origin(annotation) is None:
        return annotation.__qualname__
    return repr(annotation).replace("typing.", "")


def type_name(value: Any) -> str:
    """Name of the runtime type of a value."""
    return type(value).__qualname__
