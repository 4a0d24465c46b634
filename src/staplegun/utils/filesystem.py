"""Filesystem probes used by the plugin loader."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Literal

PathKind = Literal["file", "dir"]


def exists(path: str | Path) -> PathKind | None:
    """
    Probe a path.

    Args:
        path: The path to check.

    Returns:
        "file" for a regular file, "dir" for a directory, None otherwise.
    """
    p = Path(path)
    if p.is_dir():
        return "dir"
    if p.is_file():
        return "file"
    return None


def is_directory(path: str | Path) -> bool:
    return exists(path) == "dir"


def is_file(path: str | Path) -> bool:
    return exists(path) == "file"


def read_json(path: str | Path) -> Any:
    """
    Read and parse a JSON file.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the content is not valid JSON.
    """
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def find(base_dir: str | Path, pattern: str) -> list[str]:
    """
    Find regular files under a directory matching a glob pattern.

    Args:
        base_dir: Directory to search from.
        pattern: Glob pattern relative to base_dir (e.g. "commands/*.py").

    Returns:
        Sorted POSIX-style paths relative to base_dir.
    """
    base = Path(base_dir)
    return sorted(
        p.relative_to(base).as_posix() for p in base.glob(pattern) if p.is_file()
    )
