from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CustomServerConfig(BaseModel):
    """A user-declared server registered alongside the built-in catalog."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    command: list[str] = Field(alias="cmd", min_length=1)
    filetypes: list[str] = Field(min_length=1)
    root_markers: list[str] = Field(default_factory=list, alias="rootMarkers")
    # merged over the baseline capability set
    capabilities: dict[str, Any] = {}
    settings: dict[str, Any] = {}

    @field_validator("command", "filetypes", "root_markers", mode="before")
    @classmethod
    def _split_string(cls, v: object) -> object:
        if isinstance(v, str):
            return v.split()
        return v

    @property
    def executable(self) -> str:
        return self.command[0]


class RegistryConfig(BaseModel):
    """Contents of lsp-registry.json.

    Attributes:
        disabled: Server ids never probed or registered.
        extra_paths: Additional module search paths handed to the Python server.
        settings: Per-server settings deep-merged over the built-in payload.
        servers: Extra servers (id -> config) registered after the catalog.
        notify_missing: Emit a warning notice for each missing server binary.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    disabled: list[str] = []
    extra_paths: list[str] = Field(default_factory=list, alias="extraPaths")
    settings: dict[str, dict[str, Any]] = {}
    servers: dict[str, CustomServerConfig] = {}
    notify_missing: bool = Field(True, alias="notifyMissing")
