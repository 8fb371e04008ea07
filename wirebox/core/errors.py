"""
Errors raised by the container.
"""

from __future__ import annotations

from typing import Any


def _name(obj: Any) -> str:
    return getattr(obj, "__qualname__", None) or repr(obj)


class ContainerError(ValueError):
    """Base class for container failures caused by invalid arguments."""


class InvalidBindingError(ContainerError):
    """Raised when a concrete type does not implement the abstract type."""

    def __init__(self, abstract: Any, concrete: Any):
        self.abstract = abstract
        self.concrete = concrete
        self.message = (
            f"Class [{_name(concrete)}] does not extend or implement [{_name(abstract)}]"
        )
        super().__init__(self.message)


class AmbiguousParameterError(ContainerError):
    """Raised when an injectable parameter has no single named type."""

    def __init__(self, parameter: Any, message: str | None = None):
        self.parameter = parameter
        self.message = message or (
            f"Parameter '{parameter.name}' must declare a single class to be injected, "
            f"got {parameter.annotation!r}"
        )
        super().__init__(self.message)


class ArityOverflowError(ContainerError):
    """Raised when more arguments are given than the callable accepts."""

    def __init__(self, expected: int, received: int):
        self.expected = expected
        self.received = received
        self.message = (
            f"Callable accepts {expected} positional argument(s) but {received} were given"
        )
        super().__init__(self.message)


class UnresolvableAbstractError(ContainerError):
    """Raised when an abstract type has no binding to instantiate."""

    def __init__(self, abstract: Any):
        self.abstract = abstract
        self.message = f"Cannot instantiate [{_name(abstract)}]: abstract type has no binding"
        super().__init__(self.message)


class InvalidReceiverError(ContainerError):
    """Raised when an instance method is tapped through its class."""

    def __init__(self, target: Any, method: str):
        self.target = target
        self.method = method
        self.message = (
            f"Cannot call non-static method [{_name(target)}.{method}] without an instance"
        )
        super().__init__(self.message)


class CyclicDependencyError(ContainerError):
    """Raised when a type is required while it is still being constructed."""

    def __init__(self, path: list[type]):
        self.path = list(path)
        chain = " -> ".join(_name(cls) for cls in self.path)
        self.message = f"Cyclic dependency detected: {chain}"
        super().__init__(self.message)


class ValueNotFoundError(ContainerError, KeyError):
    """Raised when a value store has no entry for the requested id."""

    def __init__(self, key: str):
        self.key = key
        self.message = f"No value registered for [{key}]"
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
