"""Snapshot of the process environment that server descriptors depend on."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path


def _default_config_dir(environ: Mapping[str, str]) -> Path:
    base = environ.get("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / (environ.get("NVIM_APPNAME") or "nvim")


@dataclass(frozen=True)
class Environment:
    """Environment context handed to descriptor factories.

    Attributes:
        search_path: Directories searched for server executables, in order.
        virtual_env: Active virtual environment root ($VIRTUAL_ENV), if any.
        python3_host_prog: Interpreter to fall back to outside a virtual environment.
        vimruntime: The editor runtime directory ($VIMRUNTIME), if known.
        config_dir: The editor configuration directory.
        cwd: Fallback project root when no root marker is found.
    """

    search_path: tuple[str, ...] = ()
    virtual_env: str | None = None
    python3_host_prog: str | None = None
    vimruntime: str | None = None
    config_dir: Path | None = None
    cwd: Path = field(default_factory=Path.cwd)

    @classmethod
    def from_os(cls, environ: Mapping[str, str] | None = None) -> Environment:
        environ = os.environ if environ is None else environ
        path = environ.get("PATH", "")
        return cls(
            search_path=tuple(p for p in path.split(os.pathsep) if p),
            virtual_env=environ.get("VIRTUAL_ENV") or None,
            python3_host_prog=environ.get("PYTHON3_HOST_PROG") or None,
            vimruntime=environ.get("VIMRUNTIME") or None,
            config_dir=_default_config_dir(environ),
            cwd=Path.cwd(),
        )

    @property
    def python_executable(self) -> str | None:
        """Interpreter of the active virtual environment, else the host interpreter."""
        if self.virtual_env:
            return str(Path(self.virtual_env) / "bin" / "python3")
        return self.python3_host_prog
