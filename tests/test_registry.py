from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from paramwire.attributes import Request, RequestProtocol
from paramwire.converter import DocumentParamConverter
from paramwire.declarations import ParamConverter
from paramwire.exceptions import ParamwireConverterError
from paramwire.registry import ConverterRegistry, ParamConverterProtocol
from tests.documents import User


@dataclass
class RecordingConverter:
    label: str
    supported: bool = True
    applied: bool = True
    calls: list[str] = field(default_factory=list)

    def supports(self, declaration: ParamConverter) -> bool:
        return self.supported

    def apply(self, request: RequestProtocol, declaration: ParamConverter) -> bool:
        self.calls.append(declaration.name)
        if self.applied:
            request.attributes.set(declaration.name, self.label)
        return self.applied


def test_all_orders_by_priority_then_registration() -> None:
    registry = ConverterRegistry()
    low = RecordingConverter("low")
    first = RecordingConverter("first")
    second = RecordingConverter("second")
    registry.add(low, priority=-5)
    registry.add(first, priority=10)
    registry.add(second, priority=10)

    assert registry.all() == [first, second, low]
    assert isinstance(low, ParamConverterProtocol)


def test_apply_uses_first_supporting_converter() -> None:
    registry = ConverterRegistry()
    unsupported = RecordingConverter("unsupported", supported=False)
    declining = RecordingConverter("declining", applied=False)
    winner = RecordingConverter("winner")
    never = RecordingConverter("never")
    for converter in (unsupported, declining, winner, never):
        registry.add(converter)
    request = Request()

    registry.apply(request, [ParamConverter(name="thing")])

    assert request.attributes.get("thing") == "winner"
    assert unsupported.calls == []
    assert declining.calls == ["thing"]
    assert never.calls == []


def test_apply_skips_attributes_already_converted(alice: User) -> None:
    registry = ConverterRegistry()
    converter = RecordingConverter("converted")
    registry.add(converter)
    request = Request.from_attributes(user=alice)

    registry.apply(request, [ParamConverter(name="user", document_class=User)])

    assert request.attributes.get("user") is alice
    assert converter.calls == []


def test_apply_uses_named_converter() -> None:
    registry = ConverterRegistry()
    registry.add(RecordingConverter("default"), priority=100)
    registry.add(RecordingConverter("named"), name="odm")
    request = Request()

    registry.apply(request, [ParamConverter(name="thing", converter="odm")])

    assert request.attributes.get("thing") == "named"
    assert registry.get("missing") is None


def test_apply_raises_for_unknown_named_converter() -> None:
    registry = ConverterRegistry()

    with pytest.raises(ParamwireConverterError, match="No converter named 'odm'"):
        registry.apply(Request(), [ParamConverter(name="thing", converter="odm")])


def test_apply_raises_when_named_converter_does_not_support() -> None:
    registry = ConverterRegistry()
    registry.add(RecordingConverter("named", supported=False), name="odm")

    with pytest.raises(ParamwireConverterError, match="does not support conversion"):
        registry.apply(Request(), [ParamConverter(name="thing", converter="odm")])


def test_apply_leaves_unsupported_declarations_untouched(
    converter: DocumentParamConverter,
) -> None:
    registry = ConverterRegistry()
    registry.add(converter, name="odm")
    request = Request.from_attributes(id="1")

    registry.apply(request, [ParamConverter(name="other")])

    assert request.attributes.keys() == ["id"]


def test_apply_runs_document_converter(converter: DocumentParamConverter, alice: User) -> None:
    registry = ConverterRegistry()
    registry.add(converter, name="odm")
    request = Request.from_attributes(id="1")

    registry.apply(request, [ParamConverter(name="user", document_class=User, converter="odm")])

    assert request.attributes.get("user") is alice
