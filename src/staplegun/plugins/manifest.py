"""Models for the parts of a plugin's package.json that Staplegun reads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

PACKAGE_FILENAME = "package.json"
ROOT_KEY = "staplegun"


class CommandConfig(BaseModel):
    """A command declared under ``staplegun.commands``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str | None = None
    file: str | None = None
    function_name: str | None = Field(default=None, alias="functionName")
    description: str | None = None


class PluginManifest(BaseModel):
    """The ``staplegun`` section of a plugin's package.json."""

    model_config = ConfigDict(extra="ignore")

    namespace: str
    defaults: dict[str, Any] | None = None
    commands: list[CommandConfig] | None = None
