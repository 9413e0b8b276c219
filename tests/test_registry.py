"""Tests for TableBuilder, build_table and RegistrationTable."""

import logging

import pytest

from lsp_registry import (
    BUILTIN_SERVERS,
    CustomServerConfig,
    Environment,
    LoggingNotifier,
    Notification,
    RegistrationTable,
    RegistryConfig,
    ServerDescriptor,
    ServerNotRegisteredError,
    TableBuilder,
    build_table,
    default_capabilities,
    make_registration_table,
)
from lsp_registry.registry._in_memory import RecordingNotifier, StaticProbe

ALL_BINARIES = {spec.executable for spec in BUILTIN_SERVERS}


@pytest.fixture
def env(tmp_path):
    return Environment(python3_host_prog="/usr/bin/python3", cwd=tmp_path)


def _descriptor(server_id="gopls", command=("gopls",), file_types=("go",)):
    def factory(environment, config):
        return ServerDescriptor(id=server_id, command=command, file_types=file_types)

    return factory


def _build(env, available, config=None, notifier=None):
    notifier = notifier or RecordingNotifier()
    table = build_table(BUILTIN_SERVERS, env, StaticProbe(available), notifier, config)
    return table, notifier


# --- register_if_available ---


def test_register_if_available_registers(env):
    builder = TableBuilder(env, RecordingNotifier())
    assert builder.register_if_available("gopls", lambda: True, _descriptor())
    assert builder.build().ids == ["gopls"]


def test_register_if_available_missing_warns_once(env):
    notifier = RecordingNotifier()
    builder = TableBuilder(env, notifier)
    assert not builder.register_if_available(
        "rust_analyzer", lambda: False, _descriptor(), executable="rust-analyzer"
    )
    assert "rust_analyzer" not in builder.build()
    assert notifier.notifications == [
        Notification(
            level="warning", message="rust-analyzer not found!", server_id="rust_analyzer"
        )
    ]


def test_missing_binary_does_not_call_factory(env):
    def factory(environment, config):
        raise AssertionError("factory must not run for a missing binary")

    builder = TableBuilder(env, RecordingNotifier())
    builder.register_if_available("gopls", lambda: False, factory)


def test_same_id_last_write_wins(env):
    builder = TableBuilder(env, RecordingNotifier())
    builder.register_if_available("gopls", lambda: True, _descriptor(command=("gopls",)))
    builder.register_if_available("gopls", lambda: True, _descriptor(command=("gopls", "serve")))
    table = builder.build()
    assert len(table) == 1
    assert table["gopls"].command == ("gopls", "serve")


def test_factory_receives_environment_and_config(env):
    seen = {}
    config = RegistryConfig(extra_paths=["/src"])

    def factory(environment, cfg):
        seen["environment"] = environment
        seen["config"] = cfg
        return ServerDescriptor(id="x", command=["x"], file_types=["x"])

    TableBuilder(env, RecordingNotifier(), config).register_if_available("x", lambda: True, factory)
    assert seen == {"environment": env, "config": config}


# --- build_table ---


def test_missing_binaries_absent_and_each_warned_once(env):
    table, notifier = _build(env, {"pylsp", "gopls"})
    assert table.ids == ["pylsp", "gopls"]
    missing = {spec.id for spec in BUILTIN_SERVERS} - {"pylsp", "gopls"}
    warned = [n.server_id for n in notifier.warnings]
    assert sorted(warned) == sorted(missing)
    assert len(warned) == len(set(warned))
    bash = next(n for n in notifier.warnings if n.server_id == "bashls")
    assert bash.message == "bash-language-server not found!"


def test_registered_descriptors_hold_invariants(env):
    table, notifier = _build(env, ALL_BINARIES)
    assert notifier.notifications == []
    assert len(table) == len(BUILTIN_SERVERS)
    for spec in BUILTIN_SERVERS:
        descriptor = table[spec.id]
        assert descriptor.file_types
        assert descriptor.command[0] == spec.executable


def test_build_is_idempotent(env):
    first, _ = _build(env, ALL_BINARIES)
    second, _ = _build(env, ALL_BINARIES)
    assert first == second
    assert first.to_dict() == second.to_dict()


def test_probe_is_called_with_executable_names(env):
    probe = StaticProbe()
    build_table(BUILTIN_SERVERS, env, probe, RecordingNotifier())
    assert probe.calls == [spec.executable for spec in BUILTIN_SERVERS]


def test_disabled_servers_are_not_probed_or_warned(env):
    probe = StaticProbe(ALL_BINARIES)
    notifier = RecordingNotifier()
    config = RegistryConfig(disabled=["ltex", "clangd"])
    table = build_table(BUILTIN_SERVERS, env, probe, notifier, config)
    assert "ltex" not in table
    assert "clangd" not in table
    assert "ltex-ls" not in probe.calls
    assert notifier.notifications == []


def test_notify_missing_false_suppresses_notice(env, caplog):
    config = RegistryConfig(notify_missing=False)
    with caplog.at_level(logging.INFO, logger="lsp_registry"):
        table, notifier = _build(env, set(), config)
    assert len(table) == 0
    assert notifier.notifications == []
    assert "gopls not found" in caplog.text


def test_settings_overrides_are_deep_merged(env):
    config = RegistryConfig(
        settings={"gopls": {"gopls": {"analyses": {"shadow": True}, "gofumpt": True}}}
    )
    table, _ = _build(env, {"gopls"}, config)
    assert table["gopls"].settings == {
        "gopls": {
            "analyses": {"unusedparams": True, "shadow": True},
            "staticcheck": True,
            "gofumpt": True,
        }
    }


def test_custom_servers_registered_after_catalog(env):
    config = RegistryConfig(
        servers={
            "yamlls": CustomServerConfig(
                cmd=["yaml-language-server", "--stdio"],
                filetypes=["yaml"],
                settings={"yaml": {"keyOrdering": False}},
            )
        }
    )
    table, notifier = _build(env, {"gopls", "yaml-language-server"}, config)
    assert table.ids[-1] == "yamlls"
    assert table["yamlls"].command == ("yaml-language-server", "--stdio")
    assert table["yamlls"].settings == {"yaml": {"keyOrdering": False}}


def test_custom_server_missing_binary_warns(env):
    config = RegistryConfig(
        servers={"yamlls": CustomServerConfig(cmd="yaml-language-server --stdio", filetypes=["yaml"])}
    )
    table, notifier = _build(env, set(), config)
    assert "yamlls" not in table
    assert any(n.message == "yaml-language-server not found!" for n in notifier.warnings)


def test_custom_server_replaces_builtin(env):
    config = RegistryConfig(
        servers={"gopls": CustomServerConfig(cmd=["gopls", "-remote=auto"], filetypes=["go"])}
    )
    table, _ = _build(env, {"gopls"}, config)
    assert table["gopls"].command == ("gopls", "-remote=auto")
    assert table.ids.count("gopls") == 1


# --- RegistrationTable ---


def test_table_lookup_unknown_raises(env):
    table, _ = _build(env, set())
    with pytest.raises(ServerNotRegisteredError):
        table["gopls"]
    assert table.get("gopls") is None


def test_table_for_filetype(env):
    config = RegistryConfig(
        servers={"marksman": CustomServerConfig(cmd=["marksman"], filetypes=["markdown"])}
    )
    table, _ = _build(env, ALL_BINARIES | {"marksman"}, config)
    assert [d.id for d in table.for_filetype("markdown")] == ["ltex", "marksman"]
    assert table.for_filetype("cobol") == []


def test_table_is_read_only(env):
    table, _ = _build(env, {"gopls"})
    with pytest.raises(TypeError):
        table["pylsp"] = table["gopls"]  # type: ignore[index]


def test_table_resolve_root(env, tmp_path):
    project = tmp_path / "svc"
    (project / "cmd").mkdir(parents=True)
    (project / "go.mod").write_text("module svc\n")
    table, _ = _build(env, {"gopls"})
    assert table.resolve_root("gopls", project / "cmd" / "main.go") == project


def test_table_resolve_root_falls_back_to_environment_cwd(tmp_path):
    cwd = tmp_path / "cwd"
    table = RegistrationTable(
        {"x": ServerDescriptor(id="x", command=["x"], file_types=["x"], root_markers=["no.such.marker"])},
        cwd=cwd,
    )
    assert table.resolve_root("x", tmp_path / "a.x") == cwd


def test_table_to_dict(env):
    table, _ = _build(env, {"bash-language-server"})
    assert list(table.to_dict()) == ["bashls"]
    assert table.to_dict()["bashls"]["cmd"] == ["bash-language-server", "start"]


# --- notifier / defaults ---


def test_logging_notifier_logs_warning(caplog):
    with caplog.at_level(logging.WARNING):
        LoggingNotifier().notify(Notification(level="warning", message="clangd not found!"))
    assert "[lsp-registry] clangd not found!" in caplog.text
    assert caplog.records[0].levelno == logging.WARNING


def test_make_registration_table_with_injected_adapters(env):
    notifier = RecordingNotifier()
    table = make_registration_table(
        environment=env, notifier=notifier, probe=StaticProbe({"clangd"})
    )
    assert table.ids == ["clangd"]
    assert len(notifier.warnings) == len(BUILTIN_SERVERS) - 1


def test_make_registration_table_defaults_to_search_path(tmp_path):
    # a search path holding no executables
    env = Environment(search_path=(str(tmp_path),), cwd=tmp_path)
    notifier = RecordingNotifier()
    table = make_registration_table(environment=env, notifier=notifier)
    assert len(table) == 0
    assert len(notifier.warnings) == len(BUILTIN_SERVERS)


def test_default_notifier_logs_missing_binary_at_warning(tmp_path, caplog):
    env = Environment(search_path=(str(tmp_path),), cwd=tmp_path)
    with caplog.at_level(logging.WARNING, logger="lsp_registry"):
        make_registration_table(environment=env)
    warnings = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
    assert "[lsp-registry] gopls not found!" in warnings
    assert len(warnings) == len(BUILTIN_SERVERS)


# --- isolation between descriptors ---


def test_mutating_a_descriptor_does_not_leak(env):
    table, _ = _build(env, ALL_BINARIES)
    gopls = table["gopls"]
    gopls.capabilities.text_document["foldingRange"]["lineFoldingOnly"] = False
    gopls.settings["gopls"]["staticcheck"] = False
    assert table["clangd"].capabilities.folding_range["lineFoldingOnly"] is True
    assert default_capabilities().folding_range["lineFoldingOnly"] is True
    assert table["gopls"].settings["gopls"]["staticcheck"] is True
    rebuilt, _ = _build(env, ALL_BINARIES)
    assert rebuilt["gopls"].capabilities.folding_range["lineFoldingOnly"] is True


def test_custom_server_capabilities_extend_baseline(env):
    config = RegistryConfig(
        servers={
            "yamlls": CustomServerConfig(
                cmd=["yaml-language-server", "--stdio"],
                filetypes=["yaml"],
                capabilities={"textDocument": {"hover": {"contentFormat": ["markdown"]}}},
            )
        }
    )
    table, _ = _build(env, {"yaml-language-server"}, config)
    caps = table["yamlls"].capabilities
    assert caps.includes(default_capabilities())
    assert caps.text_document["hover"] == {"contentFormat": ["markdown"]}
    assert table.to_dict()["yamlls"]["capabilities"]["textDocument"]["hover"]["contentFormat"] == [
        "markdown"
    ]


def test_custom_server_without_capabilities_uses_baseline(env):
    config = RegistryConfig(
        servers={"yamlls": CustomServerConfig(cmd=["yaml-language-server"], filetypes=["yaml"])}
    )
    table, _ = _build(env, {"yaml-language-server"}, config)
    assert table["yamlls"].capabilities == default_capabilities()
