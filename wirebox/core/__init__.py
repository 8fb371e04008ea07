"""
Core primitives for wirebox.
"""

from .arguments import (
    ArgumentCollector,
    CallableParameters,
    ParameterDescriptor,
    describe_callable,
    describe_constructor,
)
from .bindings import BindingTable
from .container import Container, is_instantiable
from .errors import (
    AmbiguousParameterError,
    ArityOverflowError,
    ContainerError,
    CyclicDependencyError,
    InvalidBindingError,
    InvalidReceiverError,
    UnresolvableAbstractError,
    ValueNotFoundError,
)
from .registry import SharedRegistry
from .singletons import Singleton, SingletonCache, is_singleton
from .values import ValueStore

__all__ = [
    "AmbiguousParameterError",
    "ArgumentCollector",
    "ArityOverflowError",
    "BindingTable",
    "CallableParameters",
    "Container",
    "ContainerError",
    "CyclicDependencyError",
    "InvalidBindingError",
    "InvalidReceiverError",
    "ParameterDescriptor",
    "SharedRegistry",
    "Singleton",
    "SingletonCache",
    "UnresolvableAbstractError",
    "ValueNotFoundError",
    "ValueStore",
    "describe_callable",
    "describe_constructor",
    "is_instantiable",
    "is_singleton",
]
