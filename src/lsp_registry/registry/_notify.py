from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal

logger = logging.getLogger(__name__)

Level = Literal["debug", "info", "warning", "error"]

_LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


@dataclass(frozen=True)
class Notification:
    """A user-visible notice, e.g. a missing server binary."""

    level: Level
    message: str
    title: str = "lsp-registry"
    server_id: str | None = None


class LoggingNotifier:
    """Forwards notices to the ``logging`` module."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._log = log or logger

    def notify(self, notification: Notification) -> None:
        self._log.log(
            _LOG_LEVELS[notification.level],
            "[%s] %s",
            notification.title,
            notification.message,
        )
