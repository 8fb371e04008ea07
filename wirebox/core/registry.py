"""
Registry of live instances available for injection.
"""

from __future__ import annotations

from typing import Any


class SharedRegistry:
    def __init__(self) -> None:
        self._shared: dict[type, Any] = {}

    def share(self, obj: Any, key: type | None = None) -> type:
        """Store ``obj`` under ``key`` (its own class by default) and return the key."""
        key = type(obj) if key is None else key
        self._shared[key] = obj
        return key

    def get(self, key: type) -> Any | None:
        return self._shared.get(key)

    def remove(self, key: type) -> None:
        self._shared.pop(key, None)

    def is_shared(self, key: type) -> bool:
        return key in self._shared

    def clear(self) -> None:
        self._shared.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._shared

    def __len__(self) -> int:
        return len(self._shared)
