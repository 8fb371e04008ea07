"""
Singleton marker and per-container singleton cache.

Example:
    class Settings(Singleton):
        def __init__(self, name: str = "default"):
            self.name = name

    container.new(Settings, "prod") is container.new(Settings)  # True
"""

from __future__ import annotations

import inspect
from typing import Any


class Singleton:
    """Mixin for types constructed at most once per container."""

    __slots__ = ()


def is_singleton(cls: Any) -> bool:
    return inspect.isclass(cls) and issubclass(cls, Singleton)


class SingletonCache:
    def __init__(self) -> None:
        self._instances: dict[type, Any] = {}

    def save(self, obj: Any) -> None:
        self._instances[type(obj)] = obj

    def get(self, cls: type) -> Any | None:
        return self._instances.get(cls)

    def clear(self) -> None:
        self._instances.clear()

    def __contains__(self, cls: object) -> bool:
        return cls in self._instances

    def __len__(self) -> int:
        return len(self._instances)
