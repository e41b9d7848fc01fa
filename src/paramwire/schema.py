"""Known-field discovery for mapped document classes.

Fields are read from a declaration on the class. Supported declarations, in
lookup order:

1. a ``field_definitions()`` method (class, static or instance) returning a mapping
   of field name to definition;
2. pydantic models (``model_fields``);
3. dataclasses.

Classes declaring none of these have no known fields.
"""

from __future__ import annotations

import dataclasses
import inspect
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel

from paramwire.documents import DocumentManagerProtocol


@runtime_checkable
class FieldDefinitions(Protocol):
    """Class-level field schema declaration."""

    @classmethod
    def field_definitions(cls) -> Mapping[str, Any]: ...


def known_fields(document_class: type[Any]) -> frozenset[str]:
    """Return the field names declared by ``document_class``.

    An instance-method ``field_definitions`` is read from a fresh instance,
    so such classes must be constructible without arguments.
    """
    declared = inspect.getattr_static(document_class, "field_definitions", None)
    if isinstance(declared, (classmethod, staticmethod)):
        return frozenset(document_class.field_definitions())
    if callable(declared):
        return frozenset(document_class().field_definitions())
    if isinstance(document_class, type) and issubclass(document_class, BaseModel):
        return frozenset(document_class.model_fields)
    if dataclasses.is_dataclass(document_class):
        return frozenset(field.name for field in dataclasses.fields(document_class))
    return frozenset()


def known_fields_for(
    document_manager: DocumentManagerProtocol,
    document_class: type[Any],
) -> frozenset[str]:
    """Return known fields of the class mapped for ``document_class``."""
    metadata = document_manager.get_class_metadata(document_class)
    return known_fields(metadata.document_class)


__all__ = ["FieldDefinitions", "known_fields", "known_fields_for"]
