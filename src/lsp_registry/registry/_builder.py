"""TableBuilder: probes server executables and assembles the registration table."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from .._merge import deep_merge
from ..models.config import CustomServerConfig, RegistryConfig
from ..models.capabilities import default_capabilities
from ..models.descriptor import ServerDescriptor
from ._notify import Notification
from ._table import RegistrationTable

if TYPE_CHECKING:
    from ..catalog import ServerSpec
    from ..environment import Environment
    from ._protocols import DescriptorFactory, Notifier, Probe

logger = logging.getLogger(__name__)


class TableBuilder:
    def __init__(
        self,
        environment: Environment,
        notifier: Notifier,
        config: RegistryConfig | None = None,
    ) -> None:
        self._environment = environment
        self._notifier = notifier
        self._config = config or RegistryConfig()
        self._descriptors: dict[str, ServerDescriptor] = {}

    def register_if_available(
        self,
        server_id: str,
        probe: Callable[[], bool],
        descriptor_factory: DescriptorFactory,
        executable: str | None = None,
    ) -> bool:
        """Register ``server_id`` if ``probe()`` succeeds, otherwise warn and skip.

        ``executable`` names the binary in the notice and defaults to the id.
        A later registration under the same id replaces the earlier one.
        """
        binary = executable or server_id
        if not probe():
            self._missing(server_id, binary)
            return False

        descriptor = descriptor_factory(self._environment, self._config)
        overrides = self._config.settings.get(server_id)
        if overrides:
            descriptor = descriptor.model_copy(
                update={"settings_tree": deep_merge(descriptor.settings, overrides)}
            )
        if server_id in self._descriptors:
            logger.debug("Replacing language server %s", server_id)
        self._descriptors[server_id] = descriptor
        logger.debug("Registered language server %s: %s", server_id, " ".join(descriptor.command))
        return True

    def register_spec(self, spec: ServerSpec, probe: Probe) -> bool:
        if spec.id in self._config.disabled:
            logger.debug("Language server %s disabled by configuration", spec.id)
            return False
        return self.register_if_available(
            spec.id,
            lambda: probe(spec.executable),
            spec.factory,
            executable=spec.executable,
        )

    def build(self) -> RegistrationTable:
        return RegistrationTable(self._descriptors, cwd=self._environment.cwd)

    def _missing(self, server_id: str, binary: str) -> None:
        if not self._config.notify_missing:
            logger.info("%s not found, skipping %s", binary, server_id)
            return
        self._notifier.notify(
            Notification(level="warning", message=f"{binary} not found!", server_id=server_id)
        )


def _custom_factory(server_id: str, custom: CustomServerConfig) -> DescriptorFactory:
    capabilities = default_capabilities()
    if custom.capabilities:
        capabilities = capabilities.merged(custom.capabilities)

    def factory(environment: Environment, config: RegistryConfig) -> ServerDescriptor:
        return ServerDescriptor(
            id=server_id,
            command=custom.command,
            file_types=custom.filetypes,
            root_markers=custom.root_markers,
            capabilities=capabilities,
            settings=custom.settings,
        )

    return factory


def build_table(
    specs: Iterable[ServerSpec],
    environment: Environment,
    probe: Probe,
    notifier: Notifier,
    config: RegistryConfig | None = None,
) -> RegistrationTable:
    """Build a fresh table from ``specs`` plus any servers declared in ``config``."""
    config = config or RegistryConfig()
    builder = TableBuilder(environment, notifier, config)
    for spec in specs:
        builder.register_spec(spec, probe)

    for server_id, custom in config.servers.items():
        if server_id in config.disabled:
            continue
        builder.register_if_available(
            server_id,
            lambda custom=custom: probe(custom.executable),
            _custom_factory(server_id, custom),
            executable=custom.executable,
        )
    return builder.build()
