"""
wirebox dependency injection package.

This package contains:
- Container (bindings, shared instances, singletons and injection)
- Settings loaded from the environment
- Structured logging helpers
"""

from .config import ContainerSettings
from .core import (
    AmbiguousParameterError,
    ArityOverflowError,
    Container,
    ContainerError,
    CyclicDependencyError,
    InvalidBindingError,
    InvalidReceiverError,
    Singleton,
    UnresolvableAbstractError,
    ValueNotFoundError,
    ValueStore,
)

__version__ = "0.1.0"

__all__ = [
    "AmbiguousParameterError",
    "ArityOverflowError",
    "Container",
    "ContainerError",
    "ContainerSettings",
    "CyclicDependencyError",
    "InvalidBindingError",
    "InvalidReceiverError",
    "Singleton",
    "UnresolvableAbstractError",
    "ValueNotFoundError",
    "ValueStore",
]
