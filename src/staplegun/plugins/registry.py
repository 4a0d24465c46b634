"""Plugin registry and directory discovery for Staplegun."""

from __future__ import annotations

import logging
from pathlib import Path

from staplegun.config import get_config
from staplegun.exceptions import ConfigurationError, PluginError
from staplegun.plugins.plugin import Plugin

logger = logging.getLogger(__name__)


class PluginRegistry:
    """
    Registry of successfully loaded plugins, keyed by namespace.

    Example:
        ```python
        from staplegun.plugins import Plugin, PluginRegistry

        plugin = Plugin()
        plugin.load_from_directory("plugins/my-plugin")
        PluginRegistry.register(plugin)

        same_plugin = PluginRegistry.get(plugin.namespace)
        all_plugins = PluginRegistry.list_all()
        ```
    """

    _plugins: dict[str, Plugin] = {}

    @classmethod
    def register(cls, plugin: Plugin) -> None:
        """
        Register a loaded plugin under its namespace.

        Args:
            plugin: The plugin instance to register.

        Raises:
            PluginError: If the plugin is not loaded or its namespace is taken.
        """
        if not plugin.is_loaded:
            raise PluginError(
                plugin.directory or "<unknown>",
                f"cannot register a plugin in state '{plugin.error_state.value}'",
            )
        if plugin.namespace in cls._plugins:
            raise PluginError(plugin.namespace, "namespace is already registered")
        cls._plugins[plugin.namespace] = plugin

    @classmethod
    def unregister(cls, namespace: str) -> Plugin | None:
        """
        Unregister a plugin by namespace.

        Returns:
            The unregistered plugin, or None if not found.
        """
        return cls._plugins.pop(namespace, None)

    @classmethod
    def get(cls, namespace: str) -> Plugin | None:
        """Get a plugin by namespace, or None if not found."""
        return cls._plugins.get(namespace)

    @classmethod
    def list_all(cls) -> list[Plugin]:
        """List all registered plugins."""
        return list(cls._plugins.values())

    @classmethod
    def clear(cls) -> None:
        """Clear all registered plugins."""
        cls._plugins.clear()


def discover_plugins(
    plugins_dir: str | Path | None = None, register: bool = True
) -> list[Plugin]:
    """
    Load every plugin found directly under a directory.

    Each immediate subdirectory is loaded as one plugin, in name order.
    Failed loads are logged and returned alongside the successful ones.

    Args:
        plugins_dir: Directory to scan. Defaults to the configured plugins_dir.
        register: If True, register successfully loaded plugins.

    Returns:
        A list of Plugin instances, one per subdirectory.

    Raises:
        ConfigurationError: If no usable plugins directory is available.
    """
    if plugins_dir is None:
        plugins_dir = get_config().plugins_dir
    if plugins_dir is None:
        raise ConfigurationError("No plugins directory configured")

    base = Path(plugins_dir)
    if not base.is_dir():
        raise ConfigurationError(f"Plugins directory does not exist: {base}")

    discovered: list[Plugin] = []
    for child in sorted(p for p in base.iterdir() if p.is_dir()):
        plugin = Plugin()
        plugin.load_from_directory(str(child))
        discovered.append(plugin)

        if not plugin.is_loaded:
            logger.warning(
                f"Failed to load plugin from '{child}': {plugin.error_state.value}"
            )
            continue

        if register:
            try:
                PluginRegistry.register(plugin)
                logger.info(
                    f"Registered plugin: {plugin.namespace} "
                    f"({len(plugin.commands)} commands)"
                )
            except PluginError as e:
                logger.warning(f"Plugin not registered: {e}")

    return discovered
