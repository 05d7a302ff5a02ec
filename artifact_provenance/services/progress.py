"""
Progress sinks.

Any callable ``(message, percent)`` satisfies the ProgressSink port; these are
the stock implementations.
"""

from artifact_provenance.common.observability import get_logger

logger = get_logger(__name__)


class NullProgressSink:
    """Discards progress."""

    def __call__(self, message: str, percent: int | None = None) -> None:
        return None


class LoggingProgressSink:
    """Forwards progress to the structured log."""

    def __init__(self, name: str = "progress"):
        self._logger = get_logger(name)

    def __call__(self, message: str, percent: int | None = None) -> None:
        self._logger.info("progress", message=message, percent=percent)


def percent_of(done: int, total: int) -> int:
    """Rounded percentage (half up); 100 when there is nothing to do."""
    if total <= 0:
        return 100
    return int(done * 100 / total + 0.5)
