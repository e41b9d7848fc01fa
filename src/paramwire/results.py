from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final, TypeAlias, final


@final
class NotApplicable:
    """Strategy did not apply to the request."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "NOT_APPLICABLE"


@final
class FoundNothing:
    """Strategy applied but the repository returned nothing."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "FOUND_NOTHING"


@dataclass(frozen=True, slots=True)
class Found:
    """Strategy applied and the repository returned ``value``."""

    value: Any


NOT_APPLICABLE: Final = NotApplicable()
FOUND_NOTHING: Final = FoundNothing()

LookupResult: TypeAlias = NotApplicable | FoundNothing | Found


def as_lookup_result(value: Any) -> FoundNothing | Found:
    """Wrap a repository return value; empty collections count as found."""
    if value is None:
        return FOUND_NOTHING
    return Found(value)


__all__ = [
    "FOUND_NOTHING",
    "NOT_APPLICABLE",
    "Found",
    "FoundNothing",
    "LookupResult",
    "NotApplicable",
    "as_lookup_result",
]
