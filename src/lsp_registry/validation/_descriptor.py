from __future__ import annotations

from typing import Any

from .._merge import contains_keys
from ..models.capabilities import default_capabilities
from ._result import ValidationIssue, ValidationResult


def _first(data: dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if key in data:
            return data[key]
    return None


def descriptor_issues(
    data: dict[str, Any],
    prefix: str = "",
    require_id: bool = True,
    executable: str | None = None,
    extends_baseline: bool = False,
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []

    def at(field: str) -> str:
        return f"{prefix}{field}"

    if require_id:
        server_id = data.get("id")
        if not isinstance(server_id, str) or not server_id.strip():
            issues.append(ValidationIssue("error", at("id"), "id: Required"))

    command = _first(data, "cmd", "command")
    if isinstance(command, str):
        command = command.split()
    if command is None:
        issues.append(ValidationIssue("error", at("cmd"), "cmd: Required"))
    elif not isinstance(command, list) or not command:
        issues.append(ValidationIssue("error", at("cmd"), "cmd must be a non-empty list"))
    elif not all(isinstance(arg, str) for arg in command):
        issues.append(ValidationIssue("error", at("cmd"), "cmd arguments must be strings"))
    elif not command[0].strip():
        issues.append(ValidationIssue("error", at("cmd[0]"), "cmd[0] must name an executable"))
    elif executable is not None and command[0] != executable:
        issues.append(
            ValidationIssue(
                "error",
                at("cmd[0]"),
                f'cmd[0] "{command[0]}" does not match the probed executable "{executable}"',
            )
        )

    file_types = _first(data, "filetypes", "file_types")
    if isinstance(file_types, str):
        file_types = file_types.split()
    if not file_types:
        issues.append(ValidationIssue("error", at("filetypes"), "filetypes: Required"))
    elif not isinstance(file_types, list):
        issues.append(ValidationIssue("error", at("filetypes"), "filetypes must be a list"))

    markers = _first(data, "root_markers", "rootMarkers")
    if isinstance(markers, str):
        markers = markers.split()
    if not markers:
        issues.append(
            ValidationIssue(
                "warning",
                at("root_markers"),
                "No root markers; the project root falls back to the working directory",
            )
        )
    elif isinstance(markers, list):
        seen: set[str] = set()
        for i, marker in enumerate(markers):
            if marker in seen:
                issues.append(
                    ValidationIssue(
                        "warning", at(f"root_markers[{i}]"), f'Duplicate root marker "{marker}"'
                    )
                )
            seen.add(marker)
    else:
        issues.append(
            ValidationIssue("error", at("root_markers"), "root_markers must be a list")
        )

    capabilities = data.get("capabilities")
    if capabilities is not None:
        if not isinstance(capabilities, dict):
            issues.append(
                ValidationIssue("error", at("capabilities"), "capabilities must be an object")
            )
        elif not extends_baseline and not contains_keys(
            capabilities, default_capabilities().to_dict()
        ):
            issues.append(
                ValidationIssue(
                    "error",
                    at("capabilities"),
                    "capabilities must include the baseline set (completion, foldingRange)",
                )
            )

    settings = data.get("settings")
    if settings is not None and not isinstance(settings, dict):
        issues.append(ValidationIssue("error", at("settings"), "settings must be an object"))

    return issues


def validate_descriptor(data: dict[str, Any], executable: str | None = None) -> ValidationResult:
    return ValidationResult(issues=descriptor_issues(data, executable=executable))
