from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, cast

from paramwire.attributes import AttributeBag
from paramwire.attributes import Request as AttributeRequest
from paramwire.converter import DocumentParamConverter
from paramwire.declarations import ParamConverter
from paramwire.documents import DocumentManagerProtocol
from paramwire.exceptions import ParamwireNotFoundError
from paramwire.registry import ConverterRegistry
from paramwire.settings import ParamwireSettings, get_settings

try:
    from fastapi import Depends, FastAPI, Request
    from fastapi.responses import JSONResponse
except ModuleNotFoundError as exc:  # pragma: no cover - exercised in optional import scenarios
    message = "FastAPI integration requires fastapi. Install with 'paramwire[fastapi]'."
    raise ModuleNotFoundError(message) from exc

_REGISTRY_STATE_ATTR = "paramwire_registry"
_ATTRIBUTES_STATE_ATTR = "paramwire_attributes"
_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def build_registry(
    document_manager: DocumentManagerProtocol,
    settings: ParamwireSettings | None = None,
) -> ConverterRegistry:
    """Create a registry holding a document converter for ``document_manager``."""
    settings = settings if settings is not None else get_settings()
    registry = ConverterRegistry()
    registry.add(
        DocumentParamConverter(document_manager, settings),
        priority=settings.converter_priority,
        name=settings.converter_name,
    )
    return registry


def setup_paramwire(app: FastAPI, registry: ConverterRegistry) -> None:
    """Attach ``registry`` to ``app`` and render not-found conversions as 404 responses."""
    setattr(app.state, _REGISTRY_STATE_ATTR, registry)
    app.add_exception_handler(ParamwireNotFoundError, _handle_not_found)


def Converted(  # noqa: N802
    document_class: type[Any],
    *,
    name: str | None = None,
    options: Mapping[str, Any] | None = None,
    optional: bool = False,
    converter: str | None = None,
) -> Any:
    """Declare an endpoint parameter converted from the route path parameters.

    Examples:
        .. code-block:: python

            @app.get("/users/{id}")
            def show(user: User = Converted(User)) -> dict[str, str]:
                return {"email": user.email}

    """
    declaration = ParamConverter(
        name=name or _attribute_name(document_class),
        document_class=document_class,
        options=options or {},
        optional=optional,
        converter=converter,
    )

    def convert(request: Request) -> Any:
        attribute_request = _attribute_request(request)
        _get_registry(request).apply(attribute_request, [declaration])
        return attribute_request.attributes.get(declaration.name)

    return Depends(convert)


def _attribute_request(request: Request) -> AttributeRequest:
    bag = getattr(request.state, _ATTRIBUTES_STATE_ATTR, None)
    if bag is None:
        bag = AttributeBag(request.path_params)
        setattr(request.state, _ATTRIBUTES_STATE_ATTR, bag)
    return AttributeRequest(attributes=cast("AttributeBag", bag))


def _get_registry(request: Request) -> ConverterRegistry:
    registry = getattr(request.app.state, _REGISTRY_STATE_ATTR, None)
    if registry is None:
        message = "paramwire is not configured for this application. Call setup_paramwire(app, registry)."
        raise RuntimeError(message)
    return cast("ConverterRegistry", registry)


def _attribute_name(document_class: type[Any]) -> str:
    return _CAMEL_BOUNDARY.sub("_", document_class.__name__).lower()


async def _handle_not_found(_request: Request, exc: Exception) -> JSONResponse:
    error = cast("ParamwireNotFoundError", exc)
    return JSONResponse(
        status_code=error.status_code,
        content={"detail": str(error), "code": error.code},
    )


__all__ = ["Converted", "build_registry", "setup_paramwire"]
