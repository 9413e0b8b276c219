from __future__ import annotations

import copy
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .capabilities import ClientCapabilities, default_capabilities


class ServerDescriptor(BaseModel):
    """How to launch and configure one language server.

    Built once when the registration table is assembled and never changed
    afterwards. Field aliases follow the keys the editor's client reads
    (``cmd``, ``filetypes``).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)
    id: str = Field(min_length=1)
    command: tuple[str, ...] = Field(alias="cmd", min_length=1)
    file_types: tuple[str, ...] = Field(alias="filetypes", min_length=1)
    root_markers: tuple[str, ...] = Field((), alias="rootMarkers")
    capabilities: ClientCapabilities = Field(default_factory=default_capabilities)
    settings_tree: dict[str, Any] = Field({}, alias="settings")

    @field_validator("command", "file_types", "root_markers", mode="before")
    @classmethod
    def _split_string(cls, v: object) -> object:
        if isinstance(v, str):
            return tuple(part for part in v.split() if part)
        return v

    @field_validator("settings_tree")
    @classmethod
    def _own_copy(cls, v: dict[str, Any]) -> dict[str, Any]:
        return copy.deepcopy(v)

    @field_validator("command")
    @classmethod
    def _names_executable(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        if not v[0].strip():
            raise ValueError("command[0] must name an executable")
        return v

    @model_validator(mode="after")
    def _keep_baseline_capabilities(self) -> ServerDescriptor:
        if not self.capabilities.includes(default_capabilities()):
            raise ValueError(f"capabilities for {self.id!r} drop part of the baseline set")
        return self

    @property
    def settings(self) -> dict[str, Any]:
        """A copy of the payload; the stored one never changes after construction."""
        return copy.deepcopy(self.settings_tree)

    @property
    def executable(self) -> str:
        return self.command[0]

    def handles(self, file_type: str) -> bool:
        return file_type in self.file_types

    def to_host_dict(self) -> dict[str, Any]:
        """Serialize in the shape the editor's client configuration expects."""
        data: dict[str, Any] = {
            "cmd": list(self.command),
            "filetypes": list(self.file_types),
            "root_markers": list(self.root_markers),
            "capabilities": self.capabilities.to_dict(),
        }
        if self.settings_tree:
            data["settings"] = self.settings
        return data
