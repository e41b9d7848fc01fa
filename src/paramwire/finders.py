"""Named repository finders and signature binding.

A repository author can mark finder methods with ``@finder``. The decorator
records a declarative parameter table that ``bind_by_signature`` uses to turn a
criteria mapping into positional arguments:

.. code-block:: python

    class UserRepository:
        @finder
        def find_by_status(self, status: str, limit: int = 10) -> list[User]: ...


    bind_by_signature(repository, "find_by_status", {"status": "active"})

Unmarked public methods are still accepted unless ``require_marker`` is set;
their table is derived from ``inspect.signature`` on each call.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeVar, overload

from paramwire.exceptions import ParamwireInvalidFinderError, ParamwireMissingArgumentError

F = TypeVar("F", bound=Callable[..., Any])

FINDER_SIGNATURE_ATTR = "__paramwire_finder__"
_VARIADIC_KINDS = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FinderParameter:
    """One entry of a finder's parameter table."""

    name: str
    has_default: bool = False
    default: Any = None
    keyword_only: bool = False

    @classmethod
    def from_inspect(cls, parameter: inspect.Parameter) -> FinderParameter:
        has_default = parameter.default is not inspect.Parameter.empty
        return cls(
            name=parameter.name,
            has_default=has_default,
            default=parameter.default if has_default else None,
            keyword_only=parameter.kind is inspect.Parameter.KEYWORD_ONLY,
        )


@dataclass(frozen=True, slots=True)
class FinderSignature:
    """Ordered parameter table of a finder."""

    parameters: tuple[FinderParameter, ...]

    @classmethod
    def from_callable(cls, method: Callable[..., Any]) -> FinderSignature:
        signature = inspect.signature(method)
        parameters = [
            FinderParameter.from_inspect(parameter)
            for parameter in signature.parameters.values()
            if parameter.kind not in _VARIADIC_KINDS
        ]
        # unbound functions still list ``self``
        if parameters and parameters[0].name == "self":
            parameters = parameters[1:]
        return cls(parameters=tuple(parameters))


@overload
def finder(method: F, /) -> F: ...


@overload
def finder(*, parameters: Sequence[FinderParameter] | None = None) -> Callable[[F], F]: ...


def finder(
    method: F | None = None,
    /,
    *,
    parameters: Sequence[FinderParameter] | None = None,
) -> F | Callable[[F], F]:
    """Mark a repository method as a named finder.

    Args:
        method: The finder method when used as a bare decorator.
        parameters: Explicit parameter table. Derived from the method
            signature when omitted.

    """

    def decorator(target: F) -> F:
        if parameters is None:
            signature = FinderSignature.from_callable(target)
        else:
            signature = FinderSignature(parameters=tuple(parameters))
        setattr(target, FINDER_SIGNATURE_ATTR, signature)
        return target

    if method is not None:
        return decorator(method)
    return decorator


def is_finder(method: Callable[..., Any]) -> bool:
    return isinstance(getattr(method, FINDER_SIGNATURE_ATTR, None), FinderSignature)


def finder_signature(method: Callable[..., Any]) -> FinderSignature:
    """Return the declared parameter table of ``method`` or derive it."""
    declared = getattr(method, FINDER_SIGNATURE_ATTR, None)
    if isinstance(declared, FinderSignature):
        return declared
    return FinderSignature.from_callable(method)


def get_finder(
    repository: Any,
    method_name: str,
    *,
    require_marker: bool = False,
) -> Callable[..., Any]:
    """Return the bound finder ``method_name`` of ``repository``."""
    repository_name = type(repository).__qualname__
    if not method_name or method_name.startswith("_"):
        msg = f'"{method_name}" is not a public finder of repository "{repository_name}".'
        raise ParamwireInvalidFinderError(msg)

    method = getattr(repository, method_name, None)
    if method is None or not callable(method):
        msg = f'Repository "{repository_name}" has no finder method "{method_name}".'
        raise ParamwireInvalidFinderError(msg)
    if require_marker and not is_finder(method):
        msg = (
            f'Repository method "{repository_name}.{method_name}" is not marked '
            "as a finder. Decorate it with @finder."
        )
        raise ParamwireInvalidFinderError(msg)
    return method


def bind_by_signature(
    repository: Any,
    method_name: str,
    criteria: Mapping[str, Any],
    *,
    require_marker: bool = False,
) -> Any:
    """Call a finder with arguments bound by parameter name from ``criteria``.

    Each parameter takes the criteria value of the same name, else its
    default. Criteria keys that match no parameter are ignored.

    Raises:
        ParamwireMissingArgumentError: A parameter has neither a criteria value
            nor a default.
        ParamwireInvalidFinderError: ``method_name`` is not a usable finder.

    """
    method = get_finder(repository, method_name, require_marker=require_marker)

    args: list[Any] = []
    kwargs: dict[str, Any] = {}
    for parameter in finder_signature(method).parameters:
        if parameter.name in criteria:
            value = criteria[parameter.name]
        elif parameter.has_default:
            value = parameter.default
        else:
            raise ParamwireMissingArgumentError(type(repository), method_name, parameter.name)

        if parameter.keyword_only:
            kwargs[parameter.name] = value
        else:
            args.append(value)

    logger.debug(
        "Binding %s.%s with %d positional and %d keyword arguments",
        type(repository).__qualname__,
        method_name,
        len(args),
        len(kwargs),
    )
    return method(*args, **kwargs)


__all__ = [
    "FinderParameter",
    "FinderSignature",
    "bind_by_signature",
    "finder",
    "finder_signature",
    "get_finder",
    "is_finder",
]
