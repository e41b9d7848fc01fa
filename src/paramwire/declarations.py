from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictBool


@dataclass(frozen=True, slots=True)
class ParamConverter:
    """Describe how one request attribute is converted into a document.

    Args:
        name: Request attribute the converted value is written to.
        document_class: Mapped document class to look up. ``None`` declarations
            are never supported by the document converter.
        options: Converter options. Recognized keys are ``id``, ``mapping``,
            ``repository_method`` and ``map_method_signature``; other keys are
            ignored.
        optional: Whether a miss yields ``None`` instead of an error.
        converter: Name of the registered converter that must handle this
            declaration, or ``None`` to use the first supporting one.

    """

    name: str
    document_class: type[Any] | None = None
    options: Mapping[str, Any] = field(default_factory=dict)
    optional: bool = False
    converter: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))


class ConverterOptions(BaseModel):
    """Options recognized by the document converter."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str | None = None
    mapping: dict[str, str] | None = None
    repository_method: str | None = None
    map_method_signature: StrictBool = False

    @classmethod
    def from_declaration(cls, declaration: ParamConverter) -> ConverterOptions:
        return cls.model_validate(dict(declaration.options))


__all__ = ["ConverterOptions", "ParamConverter"]
