"""
Abstract type to concrete type bindings.
"""

from __future__ import annotations

import inspect

from wirebox.core.errors import InvalidBindingError
from wirebox.utils.logging_config import get_logger

logger = get_logger(__name__)


def implements(concrete: type, abstract: type) -> bool:
    """Return True when ``concrete`` is a strict subtype of ``abstract``."""
    if not inspect.isclass(concrete) or not inspect.isclass(abstract):
        return False
    if concrete is abstract:
        return False
    if abstract in concrete.__mro__:
        return True
    try:
        return issubclass(concrete, abstract)
    except TypeError:
        # non runtime-checkable protocols refuse structural checks
        return False


class BindingTable:
    def __init__(self) -> None:
        self._bindings: dict[type, type] = {}

    def bind(self, abstract: type, concrete: type) -> None:
        if not implements(concrete, abstract):
            raise InvalidBindingError(abstract, concrete)
        self._bindings[abstract] = concrete
        logger.debug(
            "binding_registered",
            abstract=abstract.__qualname__,
            concrete=concrete.__qualname__,
        )

    def unbind(self, abstract: type) -> None:
        self._bindings.pop(abstract, None)

    def is_bound(self, abstract: type) -> bool:
        return abstract in self._bindings

    def resolve_abstract(self, abstract: type) -> type:
        """Best type to try: the bound concrete type, else ``abstract`` itself."""
        return self._bindings.get(abstract, abstract)

    def find_concrete(self, abstract: type) -> type | None:
        """The bound concrete type, or None when nothing is bound."""
        return self._bindings.get(abstract)

    def clear(self) -> None:
        self._bindings.clear()

    def __contains__(self, abstract: object) -> bool:
        return abstract in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)
