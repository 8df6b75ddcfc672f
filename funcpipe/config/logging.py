"""Configuration and setup for logging."""

from collections.abc import Sequence
import sys
from typing import Any

from loguru import logger

from funcpipe.binding import BoundStep
from funcpipe.config.settings import FuncpipeSettings
from funcpipe.execution import ExecutionResult, StepTrace
from funcpipe.items import Item
from funcpipe.lifecycle import IgnoreAllObserver


class LoggingObserver(IgnoreAllObserver):
    """Observer that logs pipeline events."""

    def on_pipeline_start(self, items: Sequence[Item]) -> None:
        logger.info("Starting pipeline of {count} items", count=len(items))

    def on_step_start(self, step: BoundStep) -> None:
        with logger.contextualize(operation=step.operation.name, position=step.position):
            logger.info(f"{step.operation.name}: Starting step")

    def on_step_finish(self, step: BoundStep, trace: StepTrace) -> None:
        with logger.contextualize(operation=trace.name, position=trace.position):
            if trace.error is None:
                logger.info(f"{trace.name}: Step completed in {trace.duration:.3f}s")
            else:
                logger.warning(f"{trace.name}: Step returned a failure")

    def on_error(self, error: Any, position: int | None) -> None:
        with logger.contextualize(position=position, error=str(error)):
            logger.error(f"Pipeline failed at position {position}: {error}")

    def on_pipeline_finish(self, result: ExecutionResult) -> None:
        with logger.contextualize(
            result_status=result.status.value,
            result_succeeded=result.succeeded(),
        ):
            if result.succeeded():
                logger.success(
                    "Pipeline finished successfully ({count} operations)",
                    count=len(result.traces),
                )
            else:
                logger.warning(
                    "Pipeline finished with status '{status}'", status=result.status.value
                )


def configure_logging(settings: FuncpipeSettings) -> None:
    logger.remove()  # Remove default handler

    logger.add(
        sys.stderr,
        serialize=settings.log_serialize,
        level=settings.log_level,
        backtrace=True,
        diagnose=settings.debug,  # Include variable values only in debug mode
    )
