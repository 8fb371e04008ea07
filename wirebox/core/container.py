"""
Dependency injection container.

Combines the binding table, the shared registry and the singleton cache
with the argument collector to construct objects and call functions with
their dependencies injected.
"""

from __future__ import annotations

import importlib
import inspect
import threading
import types
from collections.abc import Callable, Sequence
from contextlib import nullcontext
from typing import Any, TypeVar

from wirebox.config import ContainerSettings
from wirebox.core.arguments import (
    ArgumentCollector,
    describe_callable,
    describe_constructor,
)
from wirebox.core.bindings import BindingTable
from wirebox.core.errors import (
    CyclicDependencyError,
    InvalidReceiverError,
    UnresolvableAbstractError,
)
from wirebox.core.registry import SharedRegistry
from wirebox.core.singletons import SingletonCache, is_singleton
from wirebox.utils.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

_RECEIVERLESS = (staticmethod, classmethod, types.ClassMethodDescriptorType)


def _type_name(obj: Any) -> str:
    return getattr(obj, "__qualname__", None) or repr(obj)


def is_instantiable(cls: Any) -> bool:
    """True when ``cls`` is a class that can be constructed directly."""
    if not inspect.isclass(cls):
        return False
    if inspect.isabstract(cls):
        return False
    return not cls.__dict__.get("_is_protocol", False)


class Container:
    """Dependency injection container.

    Usage:
        container = Container()
        container.bind(Repository, SqlRepository)
        container.share(settings)
        service = container.new(UserService)
        result = container.tap(handler, "explicit-arg")
    """

    def __init__(self, settings: ContainerSettings | None = None) -> None:
        """Initialize an empty container.

        Args:
            settings: Container settings (defaults when not provided)
        """
        self.settings = settings or ContainerSettings()
        self._bindings = BindingTable()
        self._shared = SharedRegistry()
        self._singletons = SingletonCache()
        self._collector = ArgumentCollector(self._resolve_type)
        self._resolving: list[type] = []
        self._lock = threading.RLock() if self.settings.thread_safe else nullcontext()

    # ------------------------------------------------------------------
    # Bindings
    # ------------------------------------------------------------------
    def bind(self, abstract: type, concrete: type) -> Container:
        """Bind an abstract type to its concrete implementation.

        Args:
            abstract: Interface, protocol or base class used as the lookup key
            concrete: Class implementing ``abstract``

        Returns:
            The container, for chaining

        Raises:
            InvalidBindingError: If ``concrete`` is not a subtype of ``abstract``
        """
        with self._lock:
            self._bindings.bind(abstract, concrete)
        return self

    def unbind(self, abstract: type) -> Container:
        with self._lock:
            self._bindings.unbind(abstract)
        return self

    def is_bound(self, abstract: type) -> bool:
        return self._bindings.is_bound(abstract)

    # ------------------------------------------------------------------
    # Shared instances
    # ------------------------------------------------------------------
    def share(self, instance: Any, abstract: type | None = None) -> Container:
        """Make an existing object available for injection.

        Args:
            instance: Object to share
            abstract: Key to share it under (its own class if not provided)

        Returns:
            The container, for chaining
        """
        with self._lock:
            key = self._shared.share(instance, abstract)
            if is_singleton(type(instance)):
                self._singletons.save(instance)
        logger.debug(
            "instance_shared",
            key=_type_name(key),
            type=_type_name(type(instance)),
        )
        return self

    def remove(self, key: type) -> Container:
        with self._lock:
            self._shared.remove(key)
        return self

    def is_shared(self, key: type) -> bool:
        return self._shared.is_shared(key)

    def get(self, abstract: type[T]) -> T | None:
        """Return the object shared under ``abstract``, or None. Never constructs."""
        return self._shared.get(abstract)

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------
    def resolve_type(self, cls: type[T]) -> T:
        """Return the shared instance for ``cls`` or construct a new one.

        A newly constructed instance is not added to the shared registry.
        """
        with self._lock:
            return self._resolve_type(cls)

    def new(self, cls: type[T], *args: Any) -> T:
        """Create an instance of ``cls`` with its dependencies injected.

        Args:
            cls: Class to construct, or an abstract type with a binding
            *args: Trailing constructor arguments

        Returns:
            The new instance, or the cached one for singleton types

        Raises:
            UnresolvableAbstractError: If ``cls`` is abstract and unbound
        """
        with self._lock:
            return self._new(cls, args)

    def tap(self, action: Any, *args: Any) -> Any:
        """Call a function or method with its dependencies injected.

        ``action`` may be a callable, a ``(target, "method")`` pair where
        target is an instance or a class, or a ``"module:qualname"`` string.
        """
        with self._lock:
            if (
                isinstance(action, (tuple, list))
                and len(action) == 2
                and isinstance(action[1], str)
            ):
                return self._tap_method(action[0], action[1], args)
            if isinstance(action, str):
                target, method = self._import_reference(action)
                if method is not None:
                    return self._tap_method(target, method, args)
                return self._invoke(target, args)
            return self._invoke(action, args)

    def reset(self) -> None:
        """Clear bindings, shared instances and singletons (useful for testing)."""
        with self._lock:
            self._bindings.clear()
            self._shared.clear()
            self._singletons.clear()
            self._resolving.clear()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _resolve_type(self, cls: type) -> Any:
        instance = self._shared.get(self._bindings.resolve_abstract(cls))
        if instance is None:
            instance = self._new(cls, ())
        return instance

    def _new(self, cls: type, args: Sequence[Any]) -> Any:
        concrete = cls
        if not is_instantiable(cls):
            concrete = self._bindings.find_concrete(cls)
            if concrete is None:
                raise UnresolvableAbstractError(cls)

        singleton = is_singleton(concrete)
        if singleton:
            cached = self._singletons.get(concrete)
            if cached is not None:
                return cached

        if self.settings.detect_cycles and concrete in self._resolving:
            raise CyclicDependencyError([*self._resolving, concrete])

        self._resolving.append(concrete)
        try:
            constructor = describe_constructor(concrete)
            if constructor is None:
                call_args = list(args)
            else:
                call_args = self._collector.collect_for(constructor, args)
            instance = concrete(*call_args)
        finally:
            self._resolving.pop()

        if singleton:
            self._singletons.save(instance)
            logger.debug("singleton_cached", type=_type_name(concrete))

        logger.debug(
            "instance_constructed",
            requested=_type_name(cls),
            type=_type_name(concrete),
            injected=len(call_args) - len(args),
        )
        return instance

    def _tap_method(self, target: Any, method: str, args: Sequence[Any]) -> Any:
        if inspect.isclass(target):
            attr = inspect.getattr_static(target, method)
            if not isinstance(attr, _RECEIVERLESS) and (
                inspect.isfunction(attr) or inspect.ismethoddescriptor(attr)
            ):
                raise InvalidReceiverError(target, method)
        return self._invoke(getattr(target, method), args)

    def _invoke(self, func: Callable[..., Any], args: Sequence[Any]) -> Any:
        described = describe_callable(func)
        call_args = self._collector.collect_for(described, args)
        logger.debug(
            "callable_tapped",
            callable=_type_name(func),
            injected=len(call_args) - len(args),
        )
        return func(*call_args)

    @staticmethod
    def _import_reference(reference: str) -> tuple[Any, str | None]:
        """Import ``"module:Qualified.name"`` and split off a class method name."""
        module_name, sep, qualname = reference.partition(":")
        if not sep or not module_name or not qualname:
            raise ValueError(f"Invalid callable reference: {reference!r}")

        owner: Any = None
        obj: Any = importlib.import_module(module_name)
        parts = qualname.split(".")
        for part in parts:
            owner, obj = obj, getattr(obj, part)

        if len(parts) > 1 and inspect.isclass(owner):
            return owner, parts[-1]
        return obj, None

    def __repr__(self) -> str:
        return (
            f"Container(bindings={len(self._bindings)}, shared={len(self._shared)}, "
            f"singletons={len(self._singletons)})"
        )
