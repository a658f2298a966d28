import pytest

from ioc_context.resolution.errors import CircularDependencyError
from ioc_context.resolution.inspector import ParameterInspector
from ioc_context.resolution.registry import Registry
from ioc_context.resolution.request import ResolutionRequest
from ioc_context.resolution.resolver import Resolver
from ioc_context.services.logger.noop_logger import NoopLogger


def _request(**values: object) -> ResolutionRequest:
    registry = Registry()
    registry.register_many(values)
    return Resolver(registry, None, ParameterInspector(), NoopLogger()).request()


def test_get_records_path_and_resolved_values():
    request = _request(a=lambda b: "A" + b, b="B")
    assert request.get("a") == "AB"
    assert request.path == ["a", "b"]
    assert request.visiting == {"a": "AB", "b": "B"}


def test_repeat_of_resolved_name_is_not_a_cycle():
    request = _request(a="A")
    request.get("a")
    assert request.get("a") == "A"
    assert request.path == ["a", "a"]


def test_self_reference_is_a_cycle():
    request = _request(a=lambda a: a)
    with pytest.raises(CircularDependencyError, match="^Circular reference: a -> a$"):
        request.get("a")


def test_requests_do_not_share_state():
    resolver = Resolver(Registry(), None, ParameterInspector(), NoopLogger())
    first = resolver.request()
    second = resolver.request()
    assert first is not second
    assert first.visiting is not second.visiting
    assert first.path is not second.path


def test_explicit_args_reach_the_constructor():
    request = _request(pair=lambda left, right: (left, right))
    assert request.get("pair", [1, 2]) == (1, 2)
