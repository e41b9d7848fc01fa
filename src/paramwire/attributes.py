from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RequestAttributes(Protocol):
    """Ordered attribute bag of a request."""

    def has(self, key: str) -> bool: ...

    def get(self, key: str, default: Any = None) -> Any: ...

    def keys(self) -> list[str]: ...

    def set(self, key: str, value: Any) -> None: ...


@runtime_checkable
class RequestProtocol(Protocol):
    """Anything that exposes request attributes."""

    @property
    def attributes(self) -> RequestAttributes: ...


class AttributeBag:
    """Dict-backed ``RequestAttributes`` implementation preserving insertion order."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def has(self, key: str) -> bool:
        return key in self._values

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def keys(self) -> list[str]:
        return list(self._values)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def all(self) -> dict[str, Any]:
        return dict(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"


@dataclass(slots=True)
class Request:
    """Minimal request carrying only an attribute bag."""

    attributes: AttributeBag = field(default_factory=AttributeBag)

    @classmethod
    def from_attributes(cls, **attributes: Any) -> Request:
        return cls(attributes=AttributeBag(attributes))


__all__ = ["AttributeBag", "Request", "RequestAttributes", "RequestProtocol"]
