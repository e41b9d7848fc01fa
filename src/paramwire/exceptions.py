from __future__ import annotations

from typing import Any

NOT_FOUND_STATUS_CODE = 404


class ParamwireError(Exception):
    """Represent a base class for all paramwire-specific failures.

    Catch this type when you want to handle any paramwire error path without
    matching each concrete exception class individually.
    """


class ParamwireNotFoundError(ParamwireError):
    """Signal that no document could be converted for a required parameter.

    Raised by ``DocumentParamConverter.apply`` when the lookup returned
    ``None`` for a non-optional declaration, or when the repository reported a
    ``ParamwireResponseError`` during the lookup. In the latter case the
    original error is chained and its ``code`` is preserved.

    Framework integrations render this error as an HTTP 404 response.
    """

    status_code = NOT_FOUND_STATUS_CODE

    def __init__(
        self,
        document_class: type[Any] | None,
        *,
        code: int | None = None,
    ) -> None:
        self.document_class = document_class
        self.code = code
        super().__init__(f"{_class_name(document_class)} object not found.")


class ParamwireGuessError(ParamwireError):
    """Signal that no lookup strategy applies to the request.

    Raised by ``DocumentParamConverter.apply`` when neither the identifier
    attribute nor a usable criteria mapping is present and the declaration is
    not optional. This is a configuration error, not a data error.

    Typical fixes include declaring ``id`` or ``mapping`` options that match
    the route parameters, or marking the declaration as optional.
    """

    def __init__(self, document_class: type[Any] | None) -> None:
        self.document_class = document_class
        super().__init__(
            f"Unable to guess how to get a {_class_name(document_class)} instance "
            "from the request information.",
        )


class ParamwireMissingArgumentError(ParamwireError):
    """Signal that a finder parameter cannot be bound from the criteria.

    Raised by ``bind_by_signature`` when a finder parameter has neither a
    matching criteria key nor a default value.
    """

    def __init__(self, repository_type: type[Any], method_name: str, parameter_name: str) -> None:
        self.repository_type = repository_type
        self.method_name = method_name
        self.parameter_name = parameter_name
        super().__init__(
            f'Repository method "{repository_type.__qualname__}.{method_name}" requires that '
            f'you provide a value for the "{parameter_name}" argument.',
        )


class ParamwireInvalidFinderError(ParamwireError):
    """Signal that ``repository_method`` does not name a usable finder.

    Raised when the repository has no such public callable, or when
    ``require_finder_marker`` is enabled and the method is not decorated with
    ``@finder``.
    """


class ParamwireMappingError(ParamwireError):
    """Signal that a class is not mapped by the document manager.

    Raised by document managers from ``get_class_metadata`` and
    ``get_repository``. ``DocumentParamConverter.supports`` treats it as
    "unsupported".
    """


class ParamwireResponseError(ParamwireError):
    """Signal a not-found-style failure reported by a repository.

    Repositories raise it when the backing store answers a lookup with an
    error response. The converter translates it to ``ParamwireNotFoundError``
    and keeps ``code``.
    """

    def __init__(self, message: str, *, code: int | None = None) -> None:
        self.code = code
        super().__init__(message)


class ParamwireConverterError(ParamwireError):
    """Signal a declaration bound to an unknown or unsuitable converter.

    Raised by ``ConverterRegistry.apply`` when ``ParamConverter.converter``
    names a converter that is not registered, or one whose ``supports``
    returns ``False`` for the declaration.
    """


def _class_name(document_class: type[Any] | None) -> str:
    if document_class is None:
        return "Document"
    return document_class.__qualname__
