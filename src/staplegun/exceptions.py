"""Custom exceptions for Staplegun."""


class StaplegunError(Exception):
    """Base exception for all Staplegun errors."""

    pass


class ConfigurationError(StaplegunError):
    """Raised when there is a configuration issue."""

    pass


class PluginError(StaplegunError):
    """Raised when there is an error with a plugin."""

    def __init__(self, plugin_name: str, message: str):
        self.plugin_name = plugin_name
        super().__init__(f"Plugin '{plugin_name}': {message}")
