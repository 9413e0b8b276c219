from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pathlib import Path

from ..catalog import builtin_ids
from ._config import validate_config as _validate_config
from ._descriptor import validate_descriptor
from ._result import ValidationIssue, ValidationResult


def validate_config(data: Any) -> ValidationResult:
    """Validate a registry configuration dict (e.g. from lsp-registry.json).

    Checks value types, references to unknown servers, and every user-declared
    server entry.
    """
    return _validate_config(data, known_ids=builtin_ids())


def validate_config_file(path: Path) -> ValidationResult:
    """Load and validate an lsp-registry.json file from disk."""
    data = json.loads(path.read_text(encoding="utf-8"))
    return validate_config(data)


__all__ = [
    "ValidationIssue",
    "ValidationResult",
    "validate_config",
    "validate_config_file",
    "validate_descriptor",
]
