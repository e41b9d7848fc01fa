"""Shared pytest fixtures for paramwire tests."""

import pytest

from paramwire.converter import DocumentParamConverter
from paramwire.memory import InMemoryDocumentManager
from paramwire.settings import ParamwireSettings
from tests.documents import Order, Product, User, UserRepository


@pytest.fixture()
def settings() -> ParamwireSettings:
    """Settings with defaults, independent of the environment."""
    return ParamwireSettings(_env_prefix="PARAMWIRE_TEST_UNUSED_")


@pytest.fixture()
def alice() -> User:
    return User(id="1", email="alice@example.com", slug="alice")


@pytest.fixture()
def bob() -> User:
    return User(id="2", email="bob@example.com", slug="bob", status="blocked")


@pytest.fixture()
def user_repository(alice: User, bob: User) -> UserRepository:
    return UserRepository(alice, bob)


@pytest.fixture()
def document_manager(user_repository: UserRepository) -> InMemoryDocumentManager:
    """Document manager mapping User, Product and Order."""
    manager = InMemoryDocumentManager()
    manager.register(User, user_repository, repository_name="users")
    manager.register(Product)
    manager.register(Order)
    return manager


@pytest.fixture()
def converter(
    document_manager: InMemoryDocumentManager,
    settings: ParamwireSettings,
) -> DocumentParamConverter:
    return DocumentParamConverter(document_manager, settings)
