from __future__ import annotations

import pytest

from paramwire.documents import ClassMetadata, ClassMetadataProtocol, RepositoryProtocol
from paramwire.exceptions import ParamwireMappingError
from paramwire.finders import is_finder
from paramwire.memory import InMemoryDocumentManager, InMemoryRepository
from tests.documents import Untyped, User


def test_register_creates_repository_named_after_its_type() -> None:
    manager = InMemoryDocumentManager()

    repository = manager.register(User)

    assert isinstance(repository, InMemoryRepository)
    assert isinstance(repository, RepositoryProtocol)
    assert manager.get_repository(User) is repository
    metadata = manager.get_class_metadata(User)
    assert metadata == ClassMetadata(document_class=User, repository="InMemoryRepository")
    assert isinstance(metadata, ClassMetadataProtocol)


def test_unmapped_class_raises_mapping_error() -> None:
    manager = InMemoryDocumentManager()

    with pytest.raises(ParamwireMappingError, match="Untyped"):
        manager.get_class_metadata(Untyped)
    with pytest.raises(ParamwireMappingError):
        manager.get_repository(Untyped)


def test_repository_matches_documents_by_attributes(alice: User, bob: User) -> None:
    repository = InMemoryRepository([alice])
    repository.add(bob)

    assert repository.find_all() == [alice, bob]
    assert repository.find_by({"status": "blocked"}) == [bob]
    assert repository.find_one_by({"email": "alice@example.com"}) is alice
    assert repository.find_one_by({"email": "nobody@example.com"}) is None
    assert repository.find_one_by({"unknown": "x"}) is None


def test_repository_methods_are_marked_finders() -> None:
    repository = InMemoryRepository()

    assert is_finder(repository.find_by)
    assert is_finder(repository.find_one_by)
    assert is_finder(repository.find_all)
    assert not is_finder(repository.add)
