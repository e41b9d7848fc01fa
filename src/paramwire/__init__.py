from paramwire.attributes import AttributeBag, Request, RequestAttributes, RequestProtocol
from paramwire.converter import DocumentParamConverter
from paramwire.declarations import ConverterOptions, ParamConverter
from paramwire.documents import (
    ClassMetadata,
    ClassMetadataProtocol,
    DocumentManagerProtocol,
    RepositoryProtocol,
)
from paramwire.exceptions import (
    ParamwireConverterError,
    ParamwireError,
    ParamwireGuessError,
    ParamwireInvalidFinderError,
    ParamwireMappingError,
    ParamwireMissingArgumentError,
    ParamwireNotFoundError,
    ParamwireResponseError,
)
from paramwire.finders import FinderParameter, bind_by_signature, finder
from paramwire.memory import InMemoryDocumentManager, InMemoryRepository
from paramwire.registry import ConverterRegistry, ParamConverterProtocol
from paramwire.schema import FieldDefinitions, known_fields
from paramwire.settings import ParamwireSettings, get_settings

__all__ = [
    "AttributeBag",
    "ClassMetadata",
    "ClassMetadataProtocol",
    "ConverterOptions",
    "ConverterRegistry",
    "DocumentManagerProtocol",
    "DocumentParamConverter",
    "FieldDefinitions",
    "FinderParameter",
    "InMemoryDocumentManager",
    "InMemoryRepository",
    "ParamConverter",
    "ParamConverterProtocol",
    "ParamwireConverterError",
    "ParamwireError",
    "ParamwireGuessError",
    "ParamwireInvalidFinderError",
    "ParamwireMappingError",
    "ParamwireMissingArgumentError",
    "ParamwireNotFoundError",
    "ParamwireResponseError",
    "ParamwireSettings",
    "RepositoryProtocol",
    "Request",
    "RequestAttributes",
    "RequestProtocol",
    "bind_by_signature",
    "finder",
    "get_settings",
    "known_fields",
]
