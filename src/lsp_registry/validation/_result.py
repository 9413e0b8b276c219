from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


@dataclass
class ValidationIssue:
    """A single validation finding (error or warning)."""

    level: Literal["error", "warning"]
    path: str  # dotted field path, e.g. "servers.mylsp.cmd"
    message: str

    def __str__(self) -> str:
        if not self.path:
            return f"{self.level}: {self.message}"
        return f"{self.level}: {self.path}: {self.message}"


@dataclass
class ValidationResult:
    """Result of validating a descriptor or registry configuration.

    Attributes:
        issues: All errors and warnings. Use .errors and .warnings for filtered views.
        valid: True if there are no errors (warnings are allowed).
    """

    issues: list[ValidationIssue]

    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == "warning"]

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.level == "error"]
