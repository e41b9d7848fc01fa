from __future__ import annotations

import logging
from typing import Any

from paramwire.attributes import RequestProtocol
from paramwire.declarations import ConverterOptions, ParamConverter
from paramwire.documents import ClassMetadataProtocol, DocumentManagerProtocol
from paramwire.exceptions import (
    ParamwireGuessError,
    ParamwireMappingError,
    ParamwireNotFoundError,
    ParamwireResponseError,
)
from paramwire.results import Found, NotApplicable
from paramwire.settings import ParamwireSettings, get_settings
from paramwire.strategies import CriteriaStrategy, IdentifierStrategy

logger = logging.getLogger(__name__)


class DocumentParamConverter:
    """Convert request attributes into documents loaded from a document manager.

    ``apply`` tries an identifier lookup first and a criteria lookup second.
    The identifier lookup applies when the request holds the attribute named by
    the ``id`` option (``"id"`` by default). The criteria lookup maps request
    attributes onto document fields, either through the ``mapping`` option or
    by name, and keeps only fields the document class declares.

    The converter holds no per-request state; one instance serves concurrent
    requests as long as the document manager does.
    """

    def __init__(
        self,
        document_manager: DocumentManagerProtocol,
        settings: ParamwireSettings | None = None,
    ) -> None:
        self.document_manager = document_manager
        self.settings = settings if settings is not None else get_settings()
        self._identifier_strategy = IdentifierStrategy(document_manager, self.settings)
        self._criteria_strategy = CriteriaStrategy(document_manager, self.settings)

    def supports(self, declaration: ParamConverter) -> bool:
        """Return whether the declared class is a mapped document with a repository."""
        document_class = declaration.document_class
        if not document_class:
            return False

        try:
            metadata = self.document_manager.get_class_metadata(document_class)
        except ParamwireMappingError:
            logger.debug("%s is not a mapped document", document_class.__qualname__)
            return False

        if not isinstance(metadata, ClassMetadataProtocol):
            return False
        repository = metadata.repository
        return isinstance(repository, str) and len(repository) > 0

    def apply(self, request: RequestProtocol, declaration: ParamConverter) -> bool:
        """Resolve the declared document and store it under ``declaration.name``.

        Raises:
            ParamwireGuessError: No lookup strategy applies, or no document class
                is declared, and the declaration is not optional.
            ParamwireNotFoundError: The lookup found nothing for a required
                declaration, or the repository raised ``ParamwireResponseError``.

        """
        document_class = declaration.document_class
        if document_class is None:
            if not declaration.optional:
                raise ParamwireGuessError(document_class)
            request.attributes.set(declaration.name, None)
            return True

        attributes = request.attributes
        options = ConverterOptions.from_declaration(declaration)

        try:
            result = self._identifier_strategy.find(attributes, options, document_class)
            if isinstance(result, NotApplicable):
                result = self._criteria_strategy.find(attributes, options, document_class)
        except ParamwireResponseError as exc:
            raise ParamwireNotFoundError(document_class, code=exc.code) from exc

        value: Any = None
        if isinstance(result, NotApplicable):
            if not declaration.optional:
                raise ParamwireGuessError(document_class)
        elif isinstance(result, Found):
            value = result.value

        if value is None and not declaration.optional:
            raise ParamwireNotFoundError(document_class)

        attributes.set(declaration.name, value)
        return True


__all__ = ["DocumentParamConverter"]
