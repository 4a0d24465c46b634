"""Utility helpers for Staplegun."""

from staplegun.utils.filesystem import exists, find, read_json
from staplegun.utils.strings import is_blank

__all__ = ["exists", "find", "is_blank", "read_json"]
