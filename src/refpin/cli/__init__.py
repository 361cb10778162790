"""CLI helpers exposed for other modules."""

from .ui import StepTracker, configure_logging, console, err_console

__all__ = ["StepTracker", "configure_logging", "console", "err_console"]
