from lsp_registry import ClientCapabilities, default_capabilities


def test_baseline_folding_range():
    assert default_capabilities().folding_range == {
        "dynamicRegistration": False,
        "lineFoldingOnly": True,
    }


def test_baseline_completion_snippets():
    completion = default_capabilities().text_document["completion"]
    assert completion["completionItem"]["snippetSupport"] is True
    assert "documentation" in completion["completionItem"]["resolveSupport"]["properties"]


def test_baseline_is_shared():
    assert default_capabilities() is default_capabilities()


def test_merged_returns_superset_and_leaves_baseline_alone():
    base = default_capabilities()
    extended = base.merged({"textDocument": {"foldingRange": {"rangeLimit": 5000}}})
    assert extended.folding_range == {
        "dynamicRegistration": False,
        "lineFoldingOnly": True,
        "rangeLimit": 5000,
    }
    assert "rangeLimit" not in base.folding_range
    assert extended.includes(base)


def test_includes_detects_missing_keys():
    partial = ClientCapabilities(textDocument={"completion": {}})
    assert not partial.includes(default_capabilities())
    assert default_capabilities().includes(partial)


def test_to_dict_omits_empty_sections():
    data = default_capabilities().to_dict()
    assert set(data) == {"textDocument"}
