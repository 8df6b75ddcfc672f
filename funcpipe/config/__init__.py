"""Configuration for funcpipe: settings and logging."""

from funcpipe.config.logging import LoggingObserver, configure_logging
from funcpipe.config.settings import FuncpipeSettings

__all__ = ["FuncpipeSettings", "LoggingObserver", "configure_logging"]
