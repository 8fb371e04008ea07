"""Tests for parameter inspection and argument collection."""
import inspect
from typing import Any, Optional, Union

import pytest
from hypothesis import given, strategies as st

from wirebox.core.arguments import (
    ArgumentCollector,
    ParameterDescriptor,
    describe_callable,
    describe_constructor,
    normalize_annotation,
)
from wirebox.core.errors import AmbiguousParameterError, ArityOverflowError


class Dependency:
    pass


class NoConstructor:
    pass


class WithConstructor:
    def __init__(self, dep: Dependency, label: str = "x"):
        self.dep = dep
        self.label = label


def _never(cls):
    raise AssertionError(f"unexpected resolution of {cls!r}")


def _collector(resolved=None):
    resolved = resolved if resolved is not None else []

    def resolve(cls):
        resolved.append(cls)
        return cls()

    return ArgumentCollector(resolve)


# =============================================================================
# Annotation handling
# =============================================================================

def test_normalize_optional_is_nullable_named_type():
    assert normalize_annotation(Optional[Dependency]) == (Dependency, True)
    assert normalize_annotation(Dependency | None) == (Dependency, True)
    assert normalize_annotation(int | None) == (int, True)


def test_normalize_keeps_real_unions():
    annotation, nullable = normalize_annotation(Union[int, str])
    assert annotation == Union[int, str]
    assert not nullable


def test_normalize_builtin_generic_collapses_to_container():
    assert normalize_annotation(list[int]) == (list, False)
    assert normalize_annotation(dict[str, Any]) == (dict, False)


def test_describe_callable_lists_positional_parameters():
    def handler(dep: Dependency, count: int, *rest, flag: bool = False, **extra):
        return None

    described = describe_callable(handler)
    assert [p.name for p in described.parameters] == ["dep", "count"]
    assert described.variadic
    assert described.parameters[0].annotation is Dependency
    assert described.parameters[1].is_builtin


def test_describe_callable_marks_none_default_nullable():
    def handler(count: int = None):
        return count

    (param,) = describe_callable(handler).parameters
    assert param.nullable
    assert param.has_default


def test_describe_bound_method_skips_receiver():
    class Handler:
        def run(self, dep: Dependency):
            return dep

    described = describe_callable(Handler().run)
    assert [p.name for p in described.parameters] == ["dep"]


def test_unresolvable_forward_reference_is_not_named():
    def handler(dep: "MissingType"):  # noqa: F821
        return dep

    (param,) = describe_callable(handler).parameters
    assert not param.is_named


def test_describe_constructor():
    assert describe_constructor(NoConstructor) is None
    described = describe_constructor(WithConstructor)
    assert [p.name for p in described.parameters] == ["dep", "label"]


# =============================================================================
# Collection
# =============================================================================

def test_collect_injects_prefix_and_appends_explicit_args():
    resolved = []
    collector = _collector(resolved)
    params = (
        ParameterDescriptor("dep", Dependency),
        ParameterDescriptor("value", str),
    )
    args = collector.collect(params, ["explicit"])
    assert isinstance(args[0], Dependency)
    assert args[1] == "explicit"
    assert resolved == [Dependency]


def test_collect_arity_overflow():
    params = (ParameterDescriptor("a", Dependency), ParameterDescriptor("b", Dependency))
    with pytest.raises(ArityOverflowError) as excinfo:
        ArgumentCollector(_never).collect(params, [1, 2, 3])
    assert excinfo.value.expected == 2
    assert excinfo.value.received == 3


def test_collect_exact_arity_skips_injection():
    params = (ParameterDescriptor("a", Dependency), ParameterDescriptor("b", Dependency))
    assert ArgumentCollector(_never).collect(params, [1, 2]) == [1, 2]


def test_collect_variadic_passes_surplus_through():
    params = (ParameterDescriptor("a", Dependency),)
    assert ArgumentCollector(_never).collect(params, [1, 2, 3], variadic=True) == [1, 2, 3]


@pytest.mark.parametrize(
    "annotation",
    [Union[int, str], Any, "Dependency", inspect.Parameter.empty],
)
def test_collect_rejects_ambiguous_parameter(annotation):
    params = (ParameterDescriptor("a", annotation), ParameterDescriptor("b", int))
    with pytest.raises(AmbiguousParameterError) as excinfo:
        ArgumentCollector(_never).collect(params, ["value"])
    assert excinfo.value.parameter is params[0]


def test_collect_rejects_unannotated_parameter():
    described = describe_callable(lambda first, second: None)
    with pytest.raises(AmbiguousParameterError):
        ArgumentCollector(_never).collect_for(described, ["value"])


def test_ambiguous_parameter_outside_prefix_is_ignored():
    params = (ParameterDescriptor("a", Union[int, str]),)
    assert ArgumentCollector(_never).collect(params, [5]) == [5]


def test_collect_nullable_builtin_gets_none():
    params = (ParameterDescriptor("a", int, nullable=True), ParameterDescriptor("b", str))
    assert ArgumentCollector(_never).collect(params, ["x"]) == [None, "x"]


def test_collect_non_nullable_builtin_is_skipped():
    params = (ParameterDescriptor("x", int), ParameterDescriptor("y", Dependency))
    args = _collector().collect(params, [])
    assert len(args) == 1
    assert isinstance(args[0], Dependency)


# =============================================================================
# Property Tests
# =============================================================================

@given(st.integers(min_value=0, max_value=6), st.lists(st.integers(), max_size=8))
def test_collect_arity_property(count, args):
    """Property: surplus args raise, otherwise the prefix is injected and args trail."""
    params = [ParameterDescriptor(f"p{i}", int, nullable=True) for i in range(count)]
    collector = ArgumentCollector(_never)

    if len(args) > count:
        with pytest.raises(ArityOverflowError):
            collector.collect(params, args)
        return

    result = collector.collect(params, args)
    injected = count - len(args)
    assert len(result) == count
    assert result[:injected] == [None] * injected
    assert result[injected:] == args


# =============================================================================
# Deferred annotations
# =============================================================================

def test_unresolvable_hint_keeps_other_hints():
    from deferred_services import Billing, Ledger

    ledger, amount = describe_constructor(Billing).parameters
    assert ledger.annotation is Ledger
    assert ledger.is_named
    assert amount.annotation == "Decimal | None"
    assert not amount.is_named


def test_new_injects_past_unresolvable_trailing_hint(container):
    from deferred_services import Billing, Ledger

    billing = container.new(Billing, None)
    assert isinstance(billing.ledger, Ledger)
    assert billing.amount is None
