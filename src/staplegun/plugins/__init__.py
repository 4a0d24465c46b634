"""Plugin system for Staplegun."""

from staplegun.plugins.plugin import ErrorState, Plugin, PluginLoadResult, load_plugin
from staplegun.plugins.registry import PluginRegistry, discover_plugins

__all__ = [
    "ErrorState",
    "Plugin",
    "PluginLoadResult",
    "PluginRegistry",
    "discover_plugins",
    "load_plugin",
]
