"""Registration table API: build, probe, notify."""

from __future__ import annotations

from ..catalog import BUILTIN_SERVERS
from ..environment import Environment
from ..models.config import RegistryConfig
from ..probe import ExecutableProbe
from ._builder import TableBuilder, build_table
from ._notify import LoggingNotifier, Notification
from ._protocols import DescriptorFactory, Notifier, Probe
from ._table import RegistrationTable


def make_registration_table(
    environment: Environment | None = None,
    config: RegistryConfig | None = None,
    notifier: Notifier | None = None,
    probe: Probe | None = None,
) -> RegistrationTable:
    """Build the table for the built-in catalog with default adapters.

    environment: defaults to Environment.from_os()
    notifier: defaults to LoggingNotifier
    probe: defaults to ExecutableProbe over environment.search_path
    """
    environment = environment or Environment.from_os()
    return build_table(
        BUILTIN_SERVERS,
        environment,
        probe or ExecutableProbe(environment.search_path),
        notifier or LoggingNotifier(),
        config,
    )


__all__ = [
    "DescriptorFactory",
    "LoggingNotifier",
    "Notification",
    "Notifier",
    "Probe",
    "RegistrationTable",
    "TableBuilder",
    "build_table",
    "make_registration_table",
]
