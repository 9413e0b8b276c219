from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class LoadError(Exception):
    """Raised when loading a registry configuration file fails.

    Attributes:
        path: The file or directory path that could not be loaded, if applicable.
    """

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class ServerNotRegisteredError(KeyError):
    """Raised when looking up a server id that is not in the registration table."""

    def __init__(self, server_id: str) -> None:
        self.server_id = server_id
        super().__init__(server_id)

    def __str__(self) -> str:
        return f"Language server not registered: {self.server_id}"
