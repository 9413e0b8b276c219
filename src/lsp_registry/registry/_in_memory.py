"""In-memory probe and notifier for testing (no PATH lookups, no log output)."""

from __future__ import annotations

from collections.abc import Iterable

from ._notify import Notification


class StaticProbe:
    def __init__(self, available: Iterable[str] = ()) -> None:
        self._available = set(available)
        self.calls: list[str] = []

    def __call__(self, name: str) -> bool:
        self.calls.append(name)
        return name in self._available


class RecordingNotifier:
    def __init__(self) -> None:
        self.notifications: list[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    @property
    def warnings(self) -> list[Notification]:
        return [n for n in self.notifications if n.level == "warning"]
