"""
Parameter inspection and argument collection.

The collector fills the leading parameters of a callable from the container
and appends the caller's explicit arguments after them:

    def handler(repo: Repository, user_id: int): ...

    collector.collect(describe_callable(handler).parameters, [42])
    # -> [<Repository>, 42]
"""

from __future__ import annotations

import inspect
import types
import typing
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from wirebox.core.errors import AmbiguousParameterError, ArityOverflowError

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)
_NONE_TYPE = type(None)
ParameterKind = type(inspect.Parameter.POSITIONAL_ONLY)


@dataclass(frozen=True)
class ParameterDescriptor:
    """One positional formal parameter of a callable."""

    name: str
    annotation: Any
    kind: ParameterKind = inspect.Parameter.POSITIONAL_OR_KEYWORD
    nullable: bool = False
    has_default: bool = False

    @property
    def is_named(self) -> bool:
        """True when the declared type is a single plain class."""
        if self.annotation is inspect.Parameter.empty or self.annotation is typing.Any:
            return False
        return inspect.isclass(self.annotation) and typing.get_origin(self.annotation) is None

    @property
    def is_builtin(self) -> bool:
        return self.is_named and self.annotation.__module__ == "builtins"


@dataclass(frozen=True)
class CallableParameters:
    parameters: tuple[ParameterDescriptor, ...]
    variadic: bool = False


def _is_union(annotation: Any) -> bool:
    origin = typing.get_origin(annotation)
    return origin is typing.Union or origin is types.UnionType


def normalize_annotation(annotation: Any) -> tuple[Any, bool]:
    """Reduce an annotation to ``(type, nullable)``.

    ``Optional[X]`` and ``X | None`` become ``(X, True)``. Unions with more
    than one non-None member are returned unchanged so they stay ambiguous.
    Generics over builtin containers collapse to the container class.
    """
    if annotation is None or annotation is _NONE_TYPE:
        return _NONE_TYPE, True

    if _is_union(annotation):
        members = typing.get_args(annotation)
        concrete = [member for member in members if member is not _NONE_TYPE]
        nullable = len(concrete) < len(members)
        if len(concrete) == 1:
            inner, inner_nullable = normalize_annotation(concrete[0])
            return inner, nullable or inner_nullable
        return annotation, nullable

    origin = typing.get_origin(annotation)
    if origin is not None:
        if inspect.isclass(origin) and origin.__module__ == "builtins":
            return origin, False
        return annotation, False

    return annotation, False


def _hints_for(func: Callable[..., Any]) -> dict[str, Any]:
    target: Any = func
    if inspect.isclass(func):
        target = func.__init__
    elif not inspect.isroutine(func):
        target = getattr(type(func), "__call__", func)
    try:
        return typing.get_type_hints(target)
    except (NameError, TypeError, AttributeError):
        return _hints_one_by_one(target)


def _hints_one_by_one(target: Any) -> dict[str, Any]:
    """Evaluate each annotation on its own; unresolvable ones stay as strings."""
    annotations = getattr(target, "__annotations__", None) or {}
    globalns = getattr(inspect.unwrap(target), "__globals__", {})

    hints: dict[str, Any] = {}
    for name, annotation in annotations.items():
        if not isinstance(annotation, str):
            hints[name] = annotation
            continue
        try:
            hints[name] = eval(annotation, globalns)  # noqa: S307
        except (NameError, TypeError, AttributeError, SyntaxError):
            hints[name] = annotation
    return hints


def describe_callable(
    func: Callable[..., Any], *, drop_receiver: bool = False
) -> CallableParameters:
    """List the positional parameters of ``func`` with their declared types.

    Args:
        func: Function, method, or callable object to inspect
        drop_receiver: Skip the first parameter (``self`` of an unbound ``__init__``)

    Returns:
        CallableParameters with the ordered descriptors
    """
    signature = inspect.signature(func)
    hints = _hints_for(func)

    params = list(signature.parameters.values())
    if drop_receiver and params and params[0].kind in _POSITIONAL:
        params = params[1:]

    descriptors: list[ParameterDescriptor] = []
    variadic = False
    for param in params:
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            variadic = True
            continue
        if param.kind not in _POSITIONAL:
            continue
        annotation, nullable = normalize_annotation(hints.get(param.name, param.annotation))
        has_default = param.default is not inspect.Parameter.empty
        descriptors.append(
            ParameterDescriptor(
                name=param.name,
                annotation=annotation,
                kind=param.kind,
                nullable=nullable or (has_default and param.default is None),
                has_default=has_default,
            )
        )

    return CallableParameters(parameters=tuple(descriptors), variadic=variadic)


def describe_constructor(cls: type) -> CallableParameters | None:
    """Describe ``cls.__init__``, or return None when the class has no constructor."""
    init = cls.__init__
    if init is object.__init__:
        return None
    try:
        return describe_callable(init, drop_receiver=True)
    except (ValueError, TypeError):
        return None


class ArgumentCollector:
    """Merge injected dependencies with explicit positional arguments."""

    def __init__(self, resolve: Callable[[type], Any]) -> None:
        self._resolve = resolve

    def collect(
        self,
        parameters: Sequence[ParameterDescriptor],
        args: Sequence[Any],
        *,
        variadic: bool = False,
    ) -> list[Any]:
        """Build the final positional argument list.

        Only the leading ``len(parameters) - len(args)`` parameters are
        injected. Builtin parameters get None when nullable and are skipped
        otherwise, which leaves the list shorter than the parameter list.

        Raises:
            ArityOverflowError: more args than parameters on a non-variadic callable
            AmbiguousParameterError: an injectable parameter has no single class
        """
        explicit = list(args)
        inject_count = len(parameters) - len(explicit)

        if inject_count < 0:
            if variadic:
                return explicit
            raise ArityOverflowError(len(parameters), len(explicit))
        if inject_count == 0:
            return explicit

        injected: list[Any] = []
        for parameter in parameters[:inject_count]:
            if not parameter.is_named:
                raise AmbiguousParameterError(parameter)
            if parameter.is_builtin:
                if parameter.nullable:
                    injected.append(None)
                continue
            injected.append(self._resolve(parameter.annotation))

        return [*injected, *explicit]

    def collect_for(self, described: CallableParameters, args: Sequence[Any]) -> list[Any]:
        return self.collect(described.parameters, args, variadic=described.variadic)
