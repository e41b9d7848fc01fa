from __future__ import annotations

from typing import Any

import pytest

from paramwire.exceptions import ParamwireInvalidFinderError, ParamwireMissingArgumentError
from paramwire.finders import (
    FinderParameter,
    FinderSignature,
    bind_by_signature,
    finder,
    finder_signature,
    get_finder,
    is_finder,
)


class Repository:
    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []

    def find(self, id: int, status: str) -> tuple[int, str]:  # noqa: A002
        return id, status

    @finder
    def find_page(self, slug: str, page: int = 1, *, size: int = 20) -> tuple[str, int, int]:
        return slug, page, size

    @finder(parameters=[FinderParameter("email"), FinderParameter("active", True, True)])
    def find_flexible(self, *args: Any) -> tuple[Any, ...]:
        return args

    def _hidden(self) -> None:
        pass

    label = "not callable"


def test_finder_records_signature_without_self() -> None:
    signature = finder_signature(Repository.find_page)

    assert [parameter.name for parameter in signature.parameters] == ["slug", "page", "size"]
    assert signature.parameters[1] == FinderParameter("page", has_default=True, default=1)
    assert signature.parameters[2].keyword_only is True


def test_finder_signature_is_derived_for_unmarked_methods() -> None:
    signature = finder_signature(Repository().find)

    assert signature == FinderSignature(
        parameters=(FinderParameter("id"), FinderParameter("status")),
    )


def test_is_finder_sees_marker_through_bound_methods() -> None:
    repository = Repository()

    assert is_finder(repository.find_page) is True
    assert is_finder(repository.find) is False


def test_bind_by_signature_binds_values_in_declaration_order() -> None:
    result = bind_by_signature(Repository(), "find", {"status": "active", "id": 5})

    assert result == (5, "active")


def test_bind_by_signature_falls_back_to_defaults() -> None:
    result = bind_by_signature(Repository(), "find_page", {"slug": "intro", "ignored": "x"})

    assert result == ("intro", 1, 20)


def test_bind_by_signature_passes_keyword_only_parameters_by_name() -> None:
    result = bind_by_signature(Repository(), "find_page", {"slug": "intro", "size": 5})

    assert result == ("intro", 1, 5)


def test_bind_by_signature_uses_declared_parameter_table() -> None:
    result = bind_by_signature(Repository(), "find_flexible", {"email": "a@b.com"})

    assert result == ("a@b.com", True)


def test_bind_by_signature_raises_for_missing_required_parameter() -> None:
    with pytest.raises(ParamwireMissingArgumentError) as exc_info:
        bind_by_signature(Repository(), "find", {"id": 5})

    assert exc_info.value.parameter_name == "status"
    assert exc_info.value.method_name == "find"
    assert exc_info.value.repository_type is Repository
    assert '"Repository.find"' in str(exc_info.value)
    assert '"status" argument' in str(exc_info.value)


@pytest.mark.parametrize("method_name", ["missing", "_hidden", "label", ""])
def test_get_finder_rejects_unusable_names(method_name: str) -> None:
    with pytest.raises(ParamwireInvalidFinderError):
        get_finder(Repository(), method_name)


def test_get_finder_requires_marker_when_asked() -> None:
    repository = Repository()

    assert get_finder(repository, "find_page", require_marker=True) == repository.find_page
    with pytest.raises(ParamwireInvalidFinderError, match="@finder"):
        get_finder(repository, "find", require_marker=True)
