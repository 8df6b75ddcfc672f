"""CLI commands to run pipelines assembled from command-line tokens."""

from collections.abc import Callable
import importlib
import re
from typing import Annotated, Any

from loguru import logger
import typer

from funcpipe.config.logging import LoggingObserver
from funcpipe.errors import PipelineException
from funcpipe.execution import PipelineExecutor, plan_pipeline

_REFERENCE = re.compile(r"^[A-Za-z_][\w.]*:[A-Za-z_][\w.]*$")

ItemsArgument = Annotated[
    list[str],
    typer.Argument(
        help=(
            "Pipeline items. Tokens of the form 'package.module:attribute' are imported "
            "and used as operations; every other token is passed as a string value."
        ),
    ),
]


def resolve_reference(token: str) -> Callable[..., Any]:
    """Import the object referenced by a 'package.module:attribute' token."""
    module_name, _, attribute = token.partition(":")
    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise typer.BadParameter(f"cannot import module '{module_name}': {e}") from e

    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as e:
            raise typer.BadParameter(f"'{module_name}' has no attribute '{attribute}'") from e

    if not callable(target):
        raise typer.BadParameter(f"'{token}' is not callable")
    return target


def parse_items(tokens: list[str]) -> list[Any]:
    """Turn command-line tokens into pipeline items."""
    return [resolve_reference(t) if _REFERENCE.match(t) else t for t in tokens]


def run(items: ItemsArgument):
    """Run a pipeline and exit with status 1 if it fails."""
    pipeline = parse_items(items)
    result = PipelineExecutor(observers=[LoggingObserver()]).execute(pipeline)
    if not result.succeeded():
        logger.error(f"Pipeline failed: {result.error}")
        raise typer.Exit(code=1)


def plan(items: ItemsArgument):
    """Show how the items bind to operations, without invoking anything."""
    pipeline = parse_items(items)
    try:
        steps = plan_pipeline(*pipeline)
    except PipelineException as e:
        typer.secho(f"Invalid pipeline: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e

    for step in steps:
        args = ", ".join(repr(a) for a in step.args)
        typer.echo(f"[{step.position}] {step.operation.name}({args})")
