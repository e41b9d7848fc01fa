from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ClassMetadataProtocol(Protocol):
    """Persistence mapping of one document class."""

    @property
    def repository(self) -> str:
        """Identifier of the repository serving the class."""
        ...

    @property
    def document_class(self) -> type[Any]:
        """The mapped class itself."""
        ...


@runtime_checkable
class RepositoryProtocol(Protocol):
    """Finder operations over persisted instances of one class.

    Repositories may expose further finders; they are invoked by name through
    the ``repository_method`` option.
    """

    def find_one_by(self, criteria: Mapping[str, Any]) -> Any: ...


@runtime_checkable
class DocumentManagerProtocol(Protocol):
    """Entry point of the document-mapping layer.

    Both methods raise ``ParamwireMappingError`` for classes that are not
    mapped.
    """

    def get_repository(self, document_class: type[Any]) -> Any: ...

    def get_class_metadata(self, document_class: type[Any]) -> Any: ...


@dataclass(frozen=True, slots=True)
class ClassMetadata:
    """Class metadata value object."""

    document_class: type[Any]
    repository: str


__all__ = [
    "ClassMetadata",
    "ClassMetadataProtocol",
    "DocumentManagerProtocol",
    "RepositoryProtocol",
]
