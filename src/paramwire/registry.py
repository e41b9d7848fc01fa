from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from paramwire.attributes import RequestProtocol
from paramwire.declarations import ParamConverter
from paramwire.exceptions import ParamwireConverterError

logger = logging.getLogger(__name__)


@runtime_checkable
class ParamConverterProtocol(Protocol):
    """Contract of a converter managed by ``ConverterRegistry``."""

    def supports(self, declaration: ParamConverter) -> bool: ...

    def apply(self, request: RequestProtocol, declaration: ParamConverter) -> bool: ...


@dataclass(frozen=True, slots=True)
class _Registration:
    converter: ParamConverterProtocol
    priority: int
    order: int
    name: str | None


class ConverterRegistry:
    """Hold converters and dispatch declarations to them.

    Converters run by descending priority, then in registration order.
    """

    def __init__(self) -> None:
        self._registrations: list[_Registration] = []
        self._named: dict[str, ParamConverterProtocol] = {}

    def add(
        self,
        converter: ParamConverterProtocol,
        priority: int = 0,
        name: str | None = None,
    ) -> None:
        """Register ``converter``; a named converter can be targeted by declarations."""
        self._registrations.append(
            _Registration(
                converter=converter,
                priority=priority,
                order=len(self._registrations),
                name=name,
            ),
        )
        if name is not None:
            self._named[name] = converter

    def all(self) -> list[ParamConverterProtocol]:
        ordered = sorted(self._registrations, key=lambda item: (-item.priority, item.order))
        return [registration.converter for registration in ordered]

    def get(self, name: str) -> ParamConverterProtocol | None:
        return self._named.get(name)

    def apply(self, request: RequestProtocol, declarations: Iterable[ParamConverter]) -> None:
        """Run the matching converter for every declaration."""
        for declaration in declarations:
            self._apply_one(request, declaration)

    def _apply_one(self, request: RequestProtocol, declaration: ParamConverter) -> None:
        document_class = declaration.document_class
        current = request.attributes.get(declaration.name)
        if document_class is not None and isinstance(current, document_class):
            return

        if declaration.converter is not None:
            converter = self._named.get(declaration.converter)
            if converter is None:
                msg = (
                    f"No converter named '{declaration.converter}' found for conversion "
                    f"of parameter '{declaration.name}'."
                )
                raise ParamwireConverterError(msg)
            if not converter.supports(declaration):
                msg = (
                    f"Converter '{declaration.converter}' does not support conversion "
                    f"of parameter '{declaration.name}'."
                )
                raise ParamwireConverterError(msg)
            converter.apply(request, declaration)
            return

        for converter in self.all():
            if converter.supports(declaration) and converter.apply(request, declaration):
                return

        logger.debug("No converter applied to parameter %r", declaration.name)


__all__ = ["ConverterRegistry", "ParamConverterProtocol"]
