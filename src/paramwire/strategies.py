from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from paramwire.attributes import RequestAttributes
from paramwire.declarations import ConverterOptions
from paramwire.documents import DocumentManagerProtocol
from paramwire.finders import bind_by_signature, get_finder
from paramwire.mapping import default_mapping, resolve_mapping
from paramwire.results import NOT_APPLICABLE, LookupResult, as_lookup_result
from paramwire.schema import known_fields_for
from paramwire.settings import ParamwireSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _LookupStrategy:
    document_manager: DocumentManagerProtocol
    settings: ParamwireSettings

    def _query(
        self,
        document_class: type[Any],
        options: ConverterOptions,
        criteria: Mapping[str, Any],
    ) -> Any:
        repository = self.document_manager.get_repository(document_class)
        method_name = options.repository_method
        if not method_name:
            return repository.find_one_by(criteria)

        if options.map_method_signature:
            return bind_by_signature(
                repository,
                method_name,
                criteria,
                require_marker=self.settings.require_finder_marker,
            )

        method = get_finder(
            repository,
            method_name,
            require_marker=self.settings.require_finder_marker,
        )
        return method(criteria)


@dataclass(frozen=True, slots=True)
class IdentifierStrategy(_LookupStrategy):
    """Look a document up by the identifier attribute of the request."""

    def find(
        self,
        attributes: RequestAttributes,
        options: ConverterOptions,
        document_class: type[Any],
    ) -> LookupResult:
        primary_key = options.id if options.id is not None else self.settings.default_identifier
        if not attributes.has(primary_key):
            return NOT_APPLICABLE

        criteria = {self.settings.identifier_field: attributes.get(primary_key)}
        logger.debug("Looking up %s by identifier %r", document_class.__qualname__, primary_key)
        return as_lookup_result(self._query(document_class, options, criteria))


@dataclass(frozen=True, slots=True)
class CriteriaStrategy(_LookupStrategy):
    """Look a document up by request attributes mapped onto document fields."""

    def find(
        self,
        attributes: RequestAttributes,
        options: ConverterOptions,
        document_class: type[Any],
    ) -> LookupResult:
        if options.mapping is None:
            options = options.model_copy(update={"mapping": default_mapping(attributes)})

        # an explicit id option without a value must not fall back to another lookup
        if options.id is not None and attributes.get(options.id) is None:
            return NOT_APPLICABLE

        fields = known_fields_for(self.document_manager, document_class)
        criteria = resolve_mapping(attributes, options, fields)
        logger.debug(
            "Looking up %s by criteria fields %s",
            document_class.__qualname__,
            sorted(criteria),
        )
        return as_lookup_result(self._query(document_class, options, criteria))


__all__ = ["CriteriaStrategy", "IdentifierStrategy"]
