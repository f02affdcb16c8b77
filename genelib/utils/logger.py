"""
Run logging utilities built on Loguru.

The `RunLogger` offers a small convenience layer that the engine and the demo
share, so that run boundaries and per-generation metrics are reported the same
way everywhere.  Run boundaries are emitted at a configurable level because the
engine may be invoked once per generation by polling callers.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Dict, Iterator, Mapping, Optional

from loguru import logger


class RunLogger:
    """Thin convenience wrapper around Loguru."""

    def __init__(self, experiment_name: str = "genelib", level: str = "INFO") -> None:
        self.experiment_name = experiment_name
        self.level = level

    @contextmanager
    def start_run(self, run_name: str, params: Optional[Mapping[str, object]] = None) -> Iterator[None]:
        """Context manager that emits start and completion messages around a run."""

        logger.log(self.level, "Starting {} run: {}", self.experiment_name, run_name)
        if params:
            logger.debug("Run parameters: {}", dict(params))
        yield
        logger.log(self.level, "Completed {} run: {}", self.experiment_name, run_name)

    def log_metrics(self, metrics: Dict[str, float], step: Optional[int] = None) -> None:
        """Emit metrics at debug level."""
        logger.debug("Metrics@{}: {}", step if step is not None else "-", metrics)

    def log_message(self, message: str) -> None:
        """Log a simple info message."""
        logger.info(message)
