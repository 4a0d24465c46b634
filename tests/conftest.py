"""Shared fixtures for Staplegun tests."""

import json

import pytest

from staplegun.config import StaplegunConfig, set_config
from staplegun.plugins.registry import PluginRegistry


@pytest.fixture(autouse=True)
def default_config():
    """Run every test against default settings and an empty registry."""
    set_config(StaplegunConfig(_env_file=None))
    PluginRegistry.clear()
    yield
    set_config(None)
    PluginRegistry.clear()


@pytest.fixture
def make_plugin(tmp_path):
    """Build a plugin directory from a staplegun section and command files."""

    def _make(name="plugin", staplegun=None, files=None, package=None):
        directory = tmp_path / name
        directory.mkdir()
        if package is None and staplegun is not None:
            package = json.dumps({"name": name, "staplegun": staplegun})
        if package is not None:
            (directory / "package.json").write_text(package, encoding="utf-8")
        for rel_path, source in (files or {}).items():
            path = directory / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(source, encoding="utf-8")
        return str(directory)

    return _make
