from __future__ import annotations

from collections.abc import Iterable
from pathlib import PurePath
from typing import Any

from ._descriptor import descriptor_issues
from ._result import ValidationIssue, ValidationResult

KNOWN_KEYS = frozenset(
    {"disabled", "extraPaths", "extra_paths", "settings", "servers", "notifyMissing", "notify_missing"}
)


def validate_config(data: Any, known_ids: Iterable[str] = ()) -> ValidationResult:
    issues: list[ValidationIssue] = []
    if not isinstance(data, dict):
        issues.append(ValidationIssue("error", "", "configuration must be a JSON object"))
        return ValidationResult(issues=issues)

    builtin = set(known_ids)
    servers = data.get("servers")
    if servers is None:
        servers = {}
    declared = builtin | (set(servers) if isinstance(servers, dict) else set())

    for key in data:
        if key not in KNOWN_KEYS:
            issues.append(ValidationIssue("warning", key, f'Unknown configuration key "{key}"'))

    disabled = data.get("disabled")
    if disabled is not None:
        if not isinstance(disabled, list):
            issues.append(ValidationIssue("error", "disabled", "disabled must be a list"))
        else:
            for i, server_id in enumerate(disabled):
                if server_id not in declared:
                    issues.append(
                        ValidationIssue(
                            "warning", f"disabled[{i}]", f'Unknown language server "{server_id}"'
                        )
                    )

    extra_paths = data.get("extraPaths", data.get("extra_paths"))
    if extra_paths is not None:
        if not isinstance(extra_paths, list) or not all(isinstance(p, str) for p in extra_paths):
            issues.append(
                ValidationIssue("error", "extraPaths", "extraPaths must be a list of strings")
            )
        else:
            for i, p in enumerate(extra_paths):
                if not PurePath(p).is_absolute():
                    issues.append(
                        ValidationIssue(
                            "warning",
                            f"extraPaths[{i}]",
                            f'"{p}" is relative and resolves against the server working directory',
                        )
                    )

    settings = data.get("settings")
    if settings is not None:
        if not isinstance(settings, dict):
            issues.append(ValidationIssue("error", "settings", "settings must be an object"))
        else:
            for server_id, value in settings.items():
                if not isinstance(value, dict):
                    issues.append(
                        ValidationIssue(
                            "error", f"settings.{server_id}", "settings entries must be objects"
                        )
                    )
                elif server_id not in declared:
                    issues.append(
                        ValidationIssue(
                            "warning",
                            f"settings.{server_id}",
                            f'Settings for unknown language server "{server_id}"',
                        )
                    )

    if not isinstance(servers, dict):
        issues.append(ValidationIssue("error", "servers", "servers must be an object"))
    else:
        for server_id, entry in servers.items():
            prefix = f"servers.{server_id}."
            if not isinstance(entry, dict):
                issues.append(
                    ValidationIssue("error", f"servers.{server_id}", "server entries must be objects")
                )
                continue
            if server_id in builtin:
                issues.append(
                    ValidationIssue(
                        "warning",
                        f"servers.{server_id}",
                        f'"{server_id}" replaces the built-in server of the same id',
                    )
                )
            issues.extend(
                descriptor_issues(entry, prefix=prefix, require_id=False, extends_baseline=True)
            )

    notify = data.get("notifyMissing", data.get("notify_missing"))
    if notify is not None and not isinstance(notify, bool):
        issues.append(ValidationIssue("error", "notifyMissing", "notifyMissing must be a boolean"))

    return ValidationResult(issues=issues)
