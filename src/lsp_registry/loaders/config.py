from __future__ import annotations

import json
import os
from collections.abc import Mapping
from pathlib import Path

from ..errors import LoadError
from ..models.config import RegistryConfig

CONFIG_FILENAME = "lsp-registry.json"


def load_config(path: Path) -> RegistryConfig:
    """Load and validate a registry configuration.

    Accepts either:
    - a path directly to a JSON file
    - a path to a directory containing lsp-registry.json
    """
    resolved = _resolve_config_path(path)
    try:
        data = json.loads(resolved.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise LoadError(f"Config file not found: {resolved}", path=resolved) from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Invalid JSON in {resolved}: {e}", path=resolved) from e
    except UnicodeDecodeError as e:
        raise LoadError(f"{resolved} is not UTF-8 text: {e}", path=resolved) from e
    if not isinstance(data, dict):
        raise LoadError(f"Expected a JSON object in {resolved}", path=resolved)
    return RegistryConfig.model_validate(data)


def find_config(cwd: Path | None = None, environ: Mapping[str, str] | None = None) -> Path | None:
    """Locate a config file: ``cwd`` first, then the user config directory."""
    environ = os.environ if environ is None else environ
    candidates = []
    if cwd is not None:
        candidates.append(Path(cwd) / CONFIG_FILENAME)
    xdg = environ.get("XDG_CONFIG_HOME")
    config_home = Path(xdg) if xdg else Path.home() / ".config"
    candidates.append(config_home / "lsp-registry" / CONFIG_FILENAME)
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def load_config_or_default(cwd: Path | None = None) -> RegistryConfig:
    found = find_config(cwd)
    if found is None:
        return RegistryConfig()
    return load_config(found)


def _resolve_config_path(path: Path) -> Path:
    if path.is_file():
        return path
    candidate = path / CONFIG_FILENAME
    if candidate.exists():
        return candidate
    raise LoadError(
        f"No {CONFIG_FILENAME} found at {path} or {candidate}",
        path=path,
    )
