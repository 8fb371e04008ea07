"""
Flat id -> value lookup for configuration-like entries.
"""

from __future__ import annotations

from typing import Any

from wirebox.core.errors import ValueNotFoundError


class ValueStore:
    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def set(self, key: str, value: Any) -> None:
        if not key:
            raise ValueError("key is required")
        self._values[key] = value

    def get(self, key: str) -> Any:
        if key not in self._values:
            raise ValueNotFoundError(key)
        return self._values[key]

    def has(self, key: str) -> bool:
        return key in self._values

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)
