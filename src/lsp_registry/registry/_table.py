from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from ..errors import ServerNotRegisteredError
from ..roots import find_root

if TYPE_CHECKING:
    from ..models.descriptor import ServerDescriptor


class RegistrationTable(Mapping[str, "ServerDescriptor"]):
    """Read-only mapping of server id -> descriptor, in registration order."""

    def __init__(
        self,
        descriptors: Mapping[str, ServerDescriptor] | None = None,
        cwd: Path | None = None,
    ) -> None:
        self._descriptors = MappingProxyType(dict(descriptors or {}))
        self._cwd = cwd

    def __getitem__(self, server_id: str) -> ServerDescriptor:
        try:
            return self._descriptors[server_id]
        except KeyError:
            raise ServerNotRegisteredError(server_id) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __repr__(self) -> str:
        return f"RegistrationTable({list(self._descriptors)!r})"

    @property
    def ids(self) -> list[str]:
        return list(self._descriptors)

    def for_filetype(self, file_type: str) -> list[ServerDescriptor]:
        """Descriptors whose servers handle ``file_type``, in registration order."""
        return [d for d in self._descriptors.values() if d.handles(file_type)]

    def resolve_root(self, server_id: str, path: Path | str) -> Path:
        descriptor = self[server_id]
        return find_root(path, descriptor.root_markers, cwd=self._cwd)

    def to_dict(self) -> dict[str, dict[str, Any]]:
        return {server_id: d.to_host_dict() for server_id, d in self._descriptors.items()}
