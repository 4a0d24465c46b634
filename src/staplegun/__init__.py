"""Staplegun - plugin loading for command-line tools."""

from staplegun.command import Command, CommandErrorState, LoadState
from staplegun.config import StaplegunConfig
from staplegun.plugins import ErrorState, Plugin, PluginLoadResult, load_plugin

__version__ = "0.1.0"
__all__ = [
    "Command",
    "CommandErrorState",
    "ErrorState",
    "LoadState",
    "Plugin",
    "PluginLoadResult",
    "StaplegunConfig",
    "load_plugin",
    "__version__",
]
