"""Typed settings payloads for the servers whose schema is known.

Each model renders to the nested mapping the server reads during
initialization via :meth:`ServerSettings.payload`. Servers without a typed
model take a plain mapping, see :func:`settings_payload`.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field


class ServerSettings(BaseModel):
    """Base for typed settings; ``section`` is the top-level key the server expects."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    section: ClassVar[str]

    def payload(self) -> dict[str, Any]:
        return {self.section: self.model_dump(by_alias=True)}


# --- pylsp ---


class Toggle(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    enabled: bool = True


class PylintPlugin(Toggle):
    executable: str = "pylint"


class MypyPlugin(Toggle):
    enabled: bool = False
    overrides: list[str | bool] = [True]
    report_progress: bool = True
    live_mode: bool = False


class JediCompletionPlugin(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    fuzzy: bool = True


class JediPlugin(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    extra_paths: list[str] = []


class PylspPlugins(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    # formatters
    black: Toggle = Toggle(enabled=True)
    autopep8: Toggle = Toggle(enabled=False)
    yapf: Toggle = Toggle(enabled=False)
    # linters
    pylint: PylintPlugin = PylintPlugin()
    ruff: Toggle = Toggle(enabled=False)
    pyflakes: Toggle = Toggle(enabled=False)
    pycodestyle: Toggle = Toggle(enabled=False)
    # type checker
    pylsp_mypy: MypyPlugin = MypyPlugin()
    jedi_completion: JediCompletionPlugin = JediCompletionPlugin()
    isort: Toggle = Toggle(enabled=True)
    jedi: JediPlugin = JediPlugin()


class PylspSettings(ServerSettings):
    section: ClassVar[str] = "pylsp"
    plugins: PylspPlugins = PylspPlugins()

    @classmethod
    def for_interpreter(
        cls, python_executable: str | None, extra_paths: list[str] | None = None
    ) -> PylspSettings:
        """Point the mypy plugin at ``python_executable`` and jedi at ``extra_paths``."""
        overrides: list[str | bool] = [True]
        if python_executable:
            overrides = ["--python-executable", python_executable, True]
        return cls(
            plugins=PylspPlugins(
                pylsp_mypy=MypyPlugin(overrides=overrides),
                jedi=JediPlugin(extra_paths=list(extra_paths or [])),
            )
        )


# --- ltex ---


class LtexSettings(ServerSettings):
    section: ClassVar[str] = "ltex"
    language: str = "en"


# --- rust-analyzer ---


class Enable(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    enable: bool = True


class CheckOnSave(Enable):
    command: str = "clippy"


class CargoOptions(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    all_features: bool = Field(True, alias="allFeatures")


class InlayHints(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    parameter_hints: Enable = Field(default_factory=Enable, alias="parameterHints")
    type_hints: Enable = Field(default_factory=Enable, alias="typeHints")


class RustAnalyzerSettings(ServerSettings):
    section: ClassVar[str] = "rust-analyzer"
    lens: Enable = Enable()
    check_on_save: CheckOnSave = Field(default_factory=CheckOnSave, alias="checkOnSave")
    diagnostics: Enable = Enable()
    cargo: CargoOptions = CargoOptions()
    inlay_hints: InlayHints = Field(default_factory=InlayHints, alias="inlayHints")


# --- gopls ---


class GoplsSettings(ServerSettings):
    section: ClassVar[str] = "gopls"
    analyses: dict[str, bool] = {"unusedparams": True}
    staticcheck: bool = True


# --- lua-language-server ---


class LuaRuntime(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    version: str = "LuaJIT"


class LuaDiagnostics(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    globals: list[str] = ["vim"]


class LuaWorkspace(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    library: list[str] = []
    max_preload: int = Field(2000, alias="maxPreload")
    preload_file_size: int = Field(50000, alias="preloadFileSize")


class LuaLsSettings(ServerSettings):
    section: ClassVar[str] = "Lua"
    runtime: LuaRuntime = LuaRuntime()
    diagnostics: LuaDiagnostics = LuaDiagnostics()
    workspace: LuaWorkspace = LuaWorkspace()
    telemetry: Enable = Enable(enable=False)


def settings_payload(settings: ServerSettings | Mapping[str, Any] | None) -> dict[str, Any]:
    """Render typed settings, or copy an untyped mapping, into a plain payload."""
    if settings is None:
        return {}
    if isinstance(settings, ServerSettings):
        return settings.payload()
    return copy.deepcopy(dict(settings))
