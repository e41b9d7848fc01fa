from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from paramwire.documents import ClassMetadata
from paramwire.exceptions import ParamwireMappingError
from paramwire.finders import finder

_MISSING = object()


class InMemoryRepository:
    """Repository keeping documents in a list, matched by attribute equality."""

    def __init__(self, documents: Iterable[Any] = ()) -> None:
        self._documents: list[Any] = list(documents)

    def add(self, *documents: Any) -> None:
        self._documents.extend(documents)

    @finder
    def find_all(self) -> list[Any]:
        return list(self._documents)

    @finder
    def find_by(self, criteria: Mapping[str, Any]) -> list[Any]:
        return [document for document in self._documents if _matches(document, criteria)]

    @finder
    def find_one_by(self, criteria: Mapping[str, Any]) -> Any:
        for document in self._documents:
            if _matches(document, criteria):
                return document
        return None


class InMemoryDocumentManager:
    """Document manager mapping classes onto in-memory repositories."""

    def __init__(self) -> None:
        self._metadata: dict[type[Any], ClassMetadata] = {}
        self._repositories: dict[type[Any], Any] = {}

    def register(
        self,
        document_class: type[Any],
        repository: Any | None = None,
        repository_name: str | None = None,
    ) -> Any:
        """Map ``document_class`` and return its repository."""
        if repository is None:
            repository = InMemoryRepository()
        if repository_name is None:
            repository_name = type(repository).__qualname__
        self._metadata[document_class] = ClassMetadata(
            document_class=document_class,
            repository=repository_name,
        )
        self._repositories[document_class] = repository
        return repository

    def get_class_metadata(self, document_class: type[Any]) -> ClassMetadata:
        try:
            return self._metadata[document_class]
        except KeyError:
            msg = f"Class '{document_class.__qualname__}' is not a mapped document."
            raise ParamwireMappingError(msg) from None

    def get_repository(self, document_class: type[Any]) -> Any:
        try:
            return self._repositories[document_class]
        except KeyError:
            msg = f"Class '{document_class.__qualname__}' is not a mapped document."
            raise ParamwireMappingError(msg) from None


def _matches(document: Any, criteria: Mapping[str, Any]) -> bool:
    return all(
        getattr(document, field, _MISSING) == value for field, value in criteria.items()
    )


__all__ = ["InMemoryDocumentManager", "InMemoryRepository"]
