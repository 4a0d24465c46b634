"""
Sample Staplegun Application

This example loads every plugin under examples/plugins and lists what each
one contributes.

Usage:
    python -m examples.sample_plugins

Or with a different plugins directory:
    STAPLEGUN_PLUGINS_DIR=/path/to/plugins python -m examples.sample_plugins
"""

import os
from pathlib import Path

from staplegun.plugins import PluginRegistry, discover_plugins, load_plugin
from staplegun.utils.logging import setup_logging

PLUGINS_DIR = Path(__file__).parent / "plugins"


def demo_single_plugin():
    """Demonstrate loading one plugin directory."""
    print("\n" + "=" * 50)
    print("Single Plugin Demo")
    print("=" * 50)

    result = load_plugin(str(PLUGINS_DIR / "greeter"))
    if not result.ok:
        print(f"Failed: {result.error_state.value}")
        return

    print(f"\nNamespace: {result.namespace}")
    print(f"Defaults: {dict(result.defaults)}")
    for command in result.commands:
        print(f"  {result.namespace} {command.name} - {command.description}")


def demo_discovery():
    """Demonstrate discovering a whole plugins directory."""
    print("\n" + "=" * 50)
    print("Discovery Demo")
    print("=" * 50)

    plugins_dir = os.getenv("STAPLEGUN_PLUGINS_DIR") or PLUGINS_DIR
    plugins = discover_plugins(plugins_dir)

    for plugin in plugins:
        status = plugin.load_state.value
        if not plugin.is_loaded:
            status = f"{status} ({plugin.error_state.value})"
        print(f"  {plugin.directory}: {status}")

    print(f"\nRegistered namespaces: {[p.namespace for p in PluginRegistry.list_all()]}")


if __name__ == "__main__":
    setup_logging("INFO")

    print("Staplegun - Demo")
    print("================")

    demo_single_plugin()
    demo_discovery()
