"""Status reporting for pipeline runs."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Reporter(Protocol):
    """Receives diagnostic events and the terminal status of a run."""

    def log(self, event: str) -> None: ...

    def report_error(self, message: str) -> None: ...

    def report_success(self, message: str) -> None: ...


class LoggingReporter:
    """Reporter that forwards everything to the module logger."""

    def log(self, event: str) -> None:
        logger.debug(event)

    def report_error(self, message: str) -> None:
        logger.error(message)

    def report_success(self, message: str) -> None:
        logger.info(message)
