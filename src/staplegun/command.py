"""Command descriptors and loading commands from Python files."""

from __future__ import annotations

import importlib.machinery
import importlib.util
import inspect
import logging
import sys
from enum import Enum
from pathlib import Path
from types import ModuleType
from typing import Any, Callable

from staplegun.utils.filesystem import is_file
from staplegun.utils.strings import is_blank

logger = logging.getLogger(__name__)

# Conventional entry point looked up when no function name is given
DEFAULT_FUNCTION_NAME = "run"


class LoadState(str, Enum):
    """
    The loading stage of a plugin or command.

    none  = not loaded yet
    ok    = ready to go
    error = loading failed, see the error state
    """

    NONE = "none"
    OK = "ok"
    ERROR = "error"


class CommandErrorState(str, Enum):
    """
    Why a command failed to load.

    none            = no problems
    input           = blank file path
    missingfile     = the file does not exist
    badfile         = the file could not be imported
    missingfunction = no callable could be resolved in the module
    """

    NONE = "none"
    INPUT = "input"
    MISSINGFILE = "missingfile"
    BADFILE = "badfile"
    MISSINGFUNCTION = "missingfunction"


def _module_name_for(path: Path) -> str:
    return f"staplegun_command_{path.stem}_{abs(hash(str(path)))}"


def _import_module_from_file(path: Path) -> ModuleType:
    module_name = _module_name_for(path)
    # Explicit source loader so command files need not end in .py
    loader = importlib.machinery.SourceFileLoader(module_name, str(path))
    spec = importlib.util.spec_from_file_location(module_name, path, loader=loader)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load command module from {path}")
    module = importlib.util.module_from_spec(spec)
    # dataclasses and friends look the module up in sys.modules while executing
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except (Exception, SystemExit):
        sys.modules.pop(module_name, None)
        raise
    return module


def _detect_function(module: ModuleType) -> tuple[str, Callable[..., Any]] | None:
    candidate = getattr(module, DEFAULT_FUNCTION_NAME, None)
    if callable(candidate):
        return DEFAULT_FUNCTION_NAME, candidate

    # Fall back to the one public function the module defines itself
    own_functions = [
        (name, obj)
        for name, obj in inspect.getmembers(module, inspect.isfunction)
        if not name.startswith("_") and obj.__module__ == module.__name__
    ]
    if len(own_functions) == 1:
        return own_functions[0]
    return None


class Command:
    """
    A single invokable command contributed by a plugin.

    Commands are plain Python files. The callable is either named explicitly
    or auto-detected: a module-level ``run`` wins, otherwise the module must
    define exactly one public function.

    Example:
        ```python
        from staplegun.command import Command

        command = Command(name="hello")
        command.load_from_file("my-plugin/commands/hello.py")
        if command.is_loaded:
            command.function()
        ```
    """

    def __init__(self, name: str | None = None, description: str | None = None):
        self.name = name
        self.description = description
        self.reset()

    def reset(self) -> None:
        """Forget everything learned by a previous load."""
        self.file: str | None = None
        self.function_name: str | None = None
        self.function: Callable[..., Any] | None = None
        self.load_state = LoadState.NONE
        self.error_state = CommandErrorState.NONE

    @property
    def is_loaded(self) -> bool:
        return self.load_state is LoadState.OK

    def _fail(self, error_state: CommandErrorState) -> None:
        self.load_state = LoadState.ERROR
        self.error_state = error_state

    def load_from_file(self, path: str | None, function_name: str | None = None) -> None:
        """
        Load the command's function from a Python file.

        Never raises; inspect ``load_state`` and ``error_state`` afterwards.

        Args:
            path: Path to the Python file.
            function_name: Name of the function to use. Auto-detected if None.
        """
        self.reset()

        if is_blank(path):
            self._fail(CommandErrorState.INPUT)
            return

        if not is_file(path):
            self._fail(CommandErrorState.MISSINGFILE)
            return

        self.file = str(path)

        # sys.exit() at import time is just another bad file
        try:
            module = _import_module_from_file(Path(path))
        except (Exception, SystemExit) as e:
            logger.debug(f"Failed to import command file '{path}': {e}")
            self._fail(CommandErrorState.BADFILE)
            return

        if is_blank(function_name):
            detected = _detect_function(module)
        else:
            func = getattr(module, function_name, None)
            detected = (function_name, func) if callable(func) else None

        if detected is None:
            logger.debug(f"No command function found in '{path}'")
            self._fail(CommandErrorState.MISSINGFUNCTION)
            return

        self.function_name, self.function = detected
        if is_blank(self.name):
            self.name = Path(path).stem
        if is_blank(self.description):
            doc = inspect.getdoc(self.function)
            self.description = doc.splitlines()[0] if doc else None

        self.load_state = LoadState.OK

    def get_info(self) -> dict[str, Any]:
        """Get command information as a dictionary."""
        return {
            "name": self.name,
            "description": self.description,
            "file": self.file,
            "function_name": self.function_name,
            "load_state": self.load_state.value,
            "error_state": self.error_state.value,
        }

    def __repr__(self) -> str:
        return (
            f"Command(name={self.name!r}, file={self.file!r}, "
            f"load_state={self.load_state.value!r})"
        )
