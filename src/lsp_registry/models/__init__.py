from .capabilities import ClientCapabilities, default_capabilities
from .config import CustomServerConfig, RegistryConfig
from .descriptor import ServerDescriptor
from .settings import (
    GoplsSettings,
    LtexSettings,
    LuaLsSettings,
    PylspSettings,
    RustAnalyzerSettings,
    ServerSettings,
    settings_payload,
)

__all__ = [
    "ClientCapabilities",
    "CustomServerConfig",
    "GoplsSettings",
    "LtexSettings",
    "LuaLsSettings",
    "PylspSettings",
    "RegistryConfig",
    "RustAnalyzerSettings",
    "ServerDescriptor",
    "ServerSettings",
    "default_capabilities",
    "settings_payload",
]
