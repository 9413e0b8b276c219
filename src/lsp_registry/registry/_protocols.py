"""Protocols (ports) for the table builder."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..environment import Environment
    from ..models.config import RegistryConfig
    from ..models.descriptor import ServerDescriptor
    from ._notify import Notification


class Probe(Protocol):
    """Answers whether an executable name resolves on the search path."""

    def __call__(self, name: str) -> bool: ...


class Notifier(Protocol):
    """Receives user-visible notices produced while building the table."""

    def notify(self, notification: Notification) -> None: ...


class DescriptorFactory(Protocol):
    def __call__(self, environment: Environment, config: RegistryConfig) -> ServerDescriptor: ...
