from .catalog import BUILTIN_SERVERS, ServerSpec, builtin_ids
from .environment import Environment
from .errors import LoadError, ServerNotRegisteredError
from .loaders import find_config, load_config, load_config_or_default
from .models import (
    ClientCapabilities,
    CustomServerConfig,
    RegistryConfig,
    ServerDescriptor,
    default_capabilities,
)
from .probe import ExecutableProbe
from .registry import (
    LoggingNotifier,
    Notification,
    RegistrationTable,
    TableBuilder,
    build_table,
    make_registration_table,
)
from .roots import find_root, find_root_marker
from .validation import (
    ValidationIssue,
    ValidationResult,
    validate_config,
    validate_config_file,
    validate_descriptor,
)

__version__ = "0.1.0"

__all__ = [
    "BUILTIN_SERVERS",
    "ClientCapabilities",
    "CustomServerConfig",
    "Environment",
    "ExecutableProbe",
    "LoadError",
    "LoggingNotifier",
    "Notification",
    "RegistrationTable",
    "RegistryConfig",
    "ServerDescriptor",
    "ServerNotRegisteredError",
    "ServerSpec",
    "TableBuilder",
    "ValidationIssue",
    "ValidationResult",
    "build_table",
    "builtin_ids",
    "default_capabilities",
    "find_config",
    "find_root",
    "find_root_marker",
    "load_config",
    "load_config_or_default",
    "make_registration_table",
    "validate_config",
    "validate_config_file",
    "validate_descriptor",
]
