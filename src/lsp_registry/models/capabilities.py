"""Client capabilities advertised to every registered language server."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from .._merge import contains_keys, deep_merge

# Required by fold providers that only understand whole-line folds.
FOLDING_RANGE: dict[str, Any] = {
    "dynamicRegistration": False,
    "lineFoldingOnly": True,
}

# What a completion engine advertises on top of the protocol defaults.
_COMPLETION: dict[str, Any] = {
    "dynamicRegistration": False,
    "completionItem": {
        "snippetSupport": True,
        "commitCharactersSupport": True,
        "deprecatedSupport": True,
        "preselectSupport": True,
        "tagSupport": {"valueSet": [1]},
        "insertReplaceSupport": True,
        "resolveSupport": {
            "properties": ["documentation", "detail", "additionalTextEdits"],
        },
        "insertTextModeSupport": {"valueSet": [1, 2]},
        "labelDetailsSupport": True,
    },
    "contextSupport": True,
    "insertTextMode": 1,
    "completionList": {
        "itemDefaults": [
            "commitCharacters",
            "editRange",
            "insertTextFormat",
            "insertTextMode",
            "data",
        ],
    },
}


class ClientCapabilities(BaseModel):
    """Capability set sent in the client's initialize request.

    Instances are frozen and shared between descriptors. Accessors hand out
    deep copies; use :meth:`merged` to derive an extended set.
    """

    model_config = ConfigDict(frozen=True)
    tree: dict[str, Any] = {}

    @model_validator(mode="before")
    @classmethod
    def _wrap_sections(cls, data: object) -> object:
        # accepts the wire form, e.g. {"textDocument": {...}}
        if isinstance(data, Mapping) and set(data) != {"tree"}:
            return {"tree": dict(data)}
        return data

    @field_validator("tree")
    @classmethod
    def _own_copy(cls, v: dict[str, Any]) -> dict[str, Any]:
        return copy.deepcopy(v)

    def to_dict(self) -> dict[str, Any]:
        return copy.deepcopy(self.tree)

    def merged(self, extra: Mapping[str, Any]) -> ClientCapabilities:
        """Return a new capability set with ``extra`` deep-merged over this one."""
        return ClientCapabilities.model_validate(deep_merge(self.tree, extra))

    def includes(self, other: ClientCapabilities) -> bool:
        """True if every capability key of ``other`` is also present here."""
        return contains_keys(self.tree, other.tree)

    @property
    def text_document(self) -> dict[str, Any]:
        return copy.deepcopy(self.tree.get("textDocument", {}))

    @property
    def workspace(self) -> dict[str, Any]:
        return copy.deepcopy(self.tree.get("workspace", {}))

    @property
    def folding_range(self) -> dict[str, Any] | None:
        return self.text_document.get("foldingRange")


_BASELINE = ClientCapabilities(
    textDocument={
        "completion": _COMPLETION,
        "foldingRange": FOLDING_RANGE,
    }
)


def default_capabilities() -> ClientCapabilities:
    """The shared, read-only baseline every descriptor starts from."""
    return _BASELINE
