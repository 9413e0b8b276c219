from .config import CONFIG_FILENAME, find_config, load_config, load_config_or_default

__all__ = [
    "CONFIG_FILENAME",
    "find_config",
    "load_config",
    "load_config_or_default",
]
