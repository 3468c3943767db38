from __future__ import annotations

import logging
from typing import List, Protocol, Tuple

logger = logging.getLogger(__name__)


class ProgressSink(Protocol):
    """Receives progress and log lines while formula files are written.

    Calls may arrive from a worker thread; implementations that drive a UI
    are responsible for handing them to their own thread.
    """

    def update(self, message: str, percent: int) -> None:
        ...

    def log(self, message: str) -> None:
        ...


class LoggingProgressSink:
    def __init__(self, log: logging.Logger = logger):
        self._logger = log

    def update(self, message: str, percent: int) -> None:
        self._logger.debug("[%3d%%] %s", percent, message)

    def log(self, message: str) -> None:
        self._logger.info("%s", message)


class RecordingProgressSink:
    """Keeps every update and log line in memory, optionally forwarding them."""

    def __init__(self, forward=None):
        self.updates: List[Tuple[str, int]] = []
        self.lines: List[str] = []
        self._forward = forward

    def update(self, message: str, percent: int) -> None:
        self.updates.append((message, percent))
        if self._forward is not None:
            self._forward.update(message, percent)

    def log(self, message: str) -> None:
        self.lines.append(message)
        if self._forward is not None:
            self._forward.log(message)

    @property
    def percent(self) -> int:
        return self.updates[-1][1] if self.updates else 0

    def text(self) -> str:
        return "\n".join(self.lines)
