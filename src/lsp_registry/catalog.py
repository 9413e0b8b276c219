"""Built-in language servers, declared as data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .models.descriptor import ServerDescriptor
from .models.settings import (
    GoplsSettings,
    LtexSettings,
    LuaLsSettings,
    LuaWorkspace,
    PylspSettings,
    RustAnalyzerSettings,
)

if TYPE_CHECKING:
    from .environment import Environment
    from .models.config import RegistryConfig
    from .registry._protocols import DescriptorFactory


@dataclass(frozen=True)
class ServerSpec:
    """One catalog entry: the id to register, the binary to probe, and how to describe it."""

    id: str
    executable: str
    factory: DescriptorFactory


def _pylsp(environment: Environment, config: RegistryConfig) -> ServerDescriptor:
    settings = PylspSettings.for_interpreter(environment.python_executable, config.extra_paths)
    return ServerDescriptor(
        id="pylsp",
        command=["pylsp"],
        file_types=["python"],
        root_markers=["pyproject.toml", "setup.py", "setup.cfg", ".git"],
        settings=settings.payload(),
    )


def _ltex(environment: Environment, config: RegistryConfig) -> ServerDescriptor:
    return ServerDescriptor(
        id="ltex",
        command=["ltex-ls"],
        file_types=["text", "plaintex", "tex", "markdown"],
        root_markers=[".git"],
        settings=LtexSettings(language="en").payload(),
    )


def _rust_analyzer(environment: Environment, config: RegistryConfig) -> ServerDescriptor:
    return ServerDescriptor(
        id="rust_analyzer",
        command=["rust-analyzer"],
        file_types=["rust"],
        root_markers=["Cargo.toml", "rust-project.json"],
        settings=RustAnalyzerSettings().payload(),
    )


def _gopls(environment: Environment, config: RegistryConfig) -> ServerDescriptor:
    return ServerDescriptor(
        id="gopls",
        command=["gopls"],
        file_types=["go", "gomod", "gowork", "gotmpl"],
        root_markers=["go.work", "go.mod", ".git"],
        settings=GoplsSettings().payload(),
    )


def _clangd(environment: Environment, config: RegistryConfig) -> ServerDescriptor:
    return ServerDescriptor(
        id="clangd",
        command=[
            "clangd",
            "--background-index",
            "-j=15",
            "--header-insertion=never",
            "--completion-style=detailed",
        ],
        file_types=["c", "cpp", "hpp", "objc", "objcpp", "cuda", "proto"],
        root_markers=[
            ".clangd",
            ".clang-tidy",
            ".clang-format",
            "compile_commands.json",
            "compile_flags.txt",
            "configure.ac",
            ".git",
        ],
    )


def _vimls(environment: Environment, config: RegistryConfig) -> ServerDescriptor:
    return ServerDescriptor(
        id="vimls",
        command=["vim-language-server", "--stdio"],
        file_types=["vim"],
        root_markers=[".git"],
    )


def _bashls(environment: Environment, config: RegistryConfig) -> ServerDescriptor:
    return ServerDescriptor(
        id="bashls",
        command=["bash-language-server", "start"],
        file_types=["sh", "bash"],
        root_markers=[".git"],
    )


def _lua_ls(environment: Environment, config: RegistryConfig) -> ServerDescriptor:
    library = [
        entry
        for entry in (
            environment.vimruntime,
            str(environment.config_dir) if environment.config_dir else None,
            # functions under vim.uv
            "${3rd}/luv/library",
        )
        if entry
    ]
    settings = LuaLsSettings(workspace=LuaWorkspace(library=library))
    return ServerDescriptor(
        id="lua_ls",
        command=["lua-language-server"],
        file_types=["lua"],
        root_markers=[
            ".luarc.json",
            ".luarc.jsonc",
            ".luacheckrc",
            ".stylua.toml",
            "stylua.toml",
            "selene.toml",
            "selene.yml",
            ".git",
        ],
        settings=settings.payload(),
    )


BUILTIN_SERVERS: tuple[ServerSpec, ...] = (
    ServerSpec("pylsp", "pylsp", _pylsp),
    ServerSpec("ltex", "ltex-ls", _ltex),
    ServerSpec("rust_analyzer", "rust-analyzer", _rust_analyzer),
    ServerSpec("gopls", "gopls", _gopls),
    ServerSpec("clangd", "clangd", _clangd),
    ServerSpec("vimls", "vim-language-server", _vimls),
    ServerSpec("bashls", "bash-language-server", _bashls),
    ServerSpec("lua_ls", "lua-language-server", _lua_ls),
)


def builtin_ids() -> list[str]:
    return [spec.id for spec in BUILTIN_SERVERS]
