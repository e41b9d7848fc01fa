from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any

from paramwire.attributes import RequestAttributes
from paramwire.declarations import ConverterOptions


def default_mapping(attributes: RequestAttributes) -> dict[str, str]:
    """Map every current request attribute onto the field of the same name."""
    return {key: key for key in attributes.keys()}


def resolve_mapping(
    attributes: RequestAttributes,
    options: ConverterOptions,
    known_fields: Collection[str],
) -> dict[str, Any]:
    """Build repository criteria from request attributes.

    Pairs whose target field is not a known field are dropped unless
    ``map_method_signature`` is set; routing noise such as ``_route`` never
    reaches the repository.
    """
    mapping: Mapping[str, str] = (
        options.mapping if options.mapping is not None else default_mapping(attributes)
    )
    return {
        field: attributes.get(attribute)
        for attribute, field in mapping.items()
        if options.map_method_signature or field in known_fields
    }


__all__ = ["default_mapping", "resolve_mapping"]
