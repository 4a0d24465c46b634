"""Loading a plugin from a directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath
from types import MappingProxyType
from typing import Any, Mapping

from staplegun.command import Command, LoadState
from staplegun.config import get_config
from staplegun.plugins.manifest import (
    PACKAGE_FILENAME,
    ROOT_KEY,
    CommandConfig,
    PluginManifest,
)
from staplegun.utils.filesystem import find, is_directory, is_file, read_json
from staplegun.utils.strings import is_blank

logger = logging.getLogger(__name__)


def _is_command_file(file: str) -> bool:
    # skips __init__.py and friends as well as hidden files
    stem = PurePosixPath(file).stem
    return not (stem.startswith(".") or stem.startswith("__"))


class ErrorState(str, Enum):
    """
    Why a plugin failed to load.

    none           = no problems
    input          = invalid directory input
    missingdir     = can't find the plugin directory
    missingpackage = can't find package.json
    badpackage     = the package.json is invalid
    namespace      = the package.json is missing namespace
    """

    NONE = "none"
    INPUT = "input"
    MISSINGDIR = "missingdir"
    MISSINGPACKAGE = "missingpackage"
    BADPACKAGE = "badpackage"
    NAMESPACE = "namespace"


class Plugin:
    """
    Extends the command-line environment with new commands.

    A plugin is a directory holding a ``package.json`` whose ``staplegun``
    section names a namespace, optional defaults and optional commands, plus
    any Python files under ``commands/``.

    Loading never raises. After :meth:`load_from_directory` the outcome is in
    ``load_state`` and, on failure, ``error_state``. An instance may be
    reloaded, but a single instance must not be loaded from several threads
    at once.

    Example:
        ```python
        from staplegun.plugins import Plugin

        plugin = Plugin()
        plugin.load_from_directory("plugins/my-plugin")
        if plugin.is_loaded:
            for command in plugin.commands:
                print(f"{plugin.namespace} {command.name}")
        else:
            print(f"Failed: {plugin.error_state.value}")
        ```
    """

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Restore every field to its initial baseline."""
        self.namespace: str | None = None
        self.load_state = LoadState.NONE
        self.error_state = ErrorState.NONE
        self.defaults: dict[str, Any] = {}
        self.directory: str | None = None
        self.error_message: str | None = None
        self.commands: list[Command] = []

    @property
    def is_loaded(self) -> bool:
        return self.load_state is LoadState.OK

    def _fail(self, error_state: ErrorState, message: str) -> None:
        # Anything populated before the failure goes back to baseline
        self.namespace = None
        self.defaults = {}
        self.commands = []
        self.load_state = LoadState.ERROR
        self.error_state = error_state
        self.error_message = message

    def load_from_directory(self, directory: str | None) -> None:
        """
        Load a plugin from a directory.

        Checks run in a fixed order and the first failure wins: blank input,
        missing directory, missing package.json, unreadable package.json or
        missing ``staplegun`` key, blank namespace.

        Args:
            directory: Path to the plugin directory.
        """
        self.reset()

        # sanity check
        if is_blank(directory):
            self._fail(ErrorState.INPUT, "No plugin directory given")
            return

        if not is_directory(directory):
            self._fail(ErrorState.MISSINGDIR, f"Plugin directory not found: {directory}")
            return

        self.directory = directory

        package_path = f"{directory}/{PACKAGE_FILENAME}"
        if not is_file(package_path):
            self._fail(ErrorState.MISSINGPACKAGE, f"Missing {PACKAGE_FILENAME} in {directory}")
            return

        # One boundary on purpose: parse errors, a missing root key and
        # anything raised while assembling commands all mean badpackage.
        try:
            pkg = read_json(package_path)
            root = pkg[ROOT_KEY]
            if not root:
                raise KeyError(ROOT_KEY)

            if is_blank(root.get("namespace")):
                self._fail(ErrorState.NAMESPACE, f"Blank namespace in {package_path}")
                return

            manifest = PluginManifest.model_validate(root)
            self.namespace = manifest.namespace
            self.defaults = manifest.defaults or {}

            commands_from_config = [
                self.load_command_from_config(config)
                for config in manifest.commands or []
            ]

            pattern = f"commands/*.{get_config().command_extension}"
            commands_from_dir = [
                self.load_command_from_file(file)
                for file in find(directory, pattern)
                if _is_command_file(file)
            ]

            # glue them together
            self.commands = [
                command
                for command in commands_from_config + commands_from_dir
                if command is not None
            ]

            self.load_state = LoadState.OK
            self.error_state = ErrorState.NONE
            self.error_message = None
        except Exception as e:
            logger.debug(f"Invalid plugin package '{package_path}': {e!r}")
            self._fail(ErrorState.BADPACKAGE, f"Invalid {PACKAGE_FILENAME} in {directory}: {e}")
            return

        logger.debug(
            f"Loaded plugin '{self.namespace}' from {directory} "
            f"with {len(self.commands)} command(s)"
        )

    def load_command_from_config(self, config: CommandConfig) -> Command:
        """
        Load a command declared in package.json.

        The command keeps its declared name and description even when its file
        cannot be loaded.
        """
        command = Command(name=config.name, description=config.description)
        if self.directory:
            path = None if is_blank(config.file) else f"{self.directory}/{config.file}"
            command.load_from_file(path, config.function_name)
        return command

    def load_command_from_file(self, file: str) -> Command:
        """
        Load a command from a file, auto-detecting its function.

        Args:
            file: The path to the file, relative to the plugin directory.
        """
        command = Command()
        if self.directory:
            command.load_from_file(f"{self.directory}/{file}")
        return command

    def get_info(self) -> dict[str, Any]:
        """Get plugin information as a dictionary."""
        return {
            "namespace": self.namespace,
            "directory": self.directory,
            "load_state": self.load_state.value,
            "error_state": self.error_state.value,
            "error_message": self.error_message,
            "defaults": dict(self.defaults),
            "commands": [command.name for command in self.commands],
        }

    def __repr__(self) -> str:
        return (
            f"Plugin(namespace={self.namespace!r}, directory={self.directory!r}, "
            f"load_state={self.load_state.value!r})"
        )


@dataclass(frozen=True)
class PluginLoadResult:
    """Immutable snapshot of a plugin load."""

    load_state: LoadState
    error_state: ErrorState
    namespace: str | None = None
    directory: str | None = None
    defaults: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    commands: tuple[Command, ...] = ()
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.load_state is LoadState.OK

    @classmethod
    def from_plugin(cls, plugin: Plugin) -> PluginLoadResult:
        return cls(
            load_state=plugin.load_state,
            error_state=plugin.error_state,
            namespace=plugin.namespace,
            directory=plugin.directory,
            defaults=MappingProxyType(dict(plugin.defaults)),
            commands=tuple(plugin.commands),
            error_message=plugin.error_message,
        )


def load_plugin(directory: str | None) -> PluginLoadResult:
    """
    Load a plugin from a directory without keeping a mutable Plugin around.

    Each call uses its own Plugin, so concurrent calls are safe.

    Args:
        directory: Path to the plugin directory.

    Returns:
        The outcome of the load.
    """
    plugin = Plugin()
    plugin.load_from_directory(directory)
    return PluginLoadResult.from_plugin(plugin)
