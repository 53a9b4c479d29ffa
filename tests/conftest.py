"""Shared pytest fixtures for dibuilder tests."""

import pytest

from dibuilder.builder import DependencyBuilder
from dibuilder.container import Container, EmptyContainer
from dibuilder.lock_mode import LockMode


@pytest.fixture()
def container() -> Container:
    """Empty container owned by the ``builder`` fixture."""
    return EmptyContainer()


@pytest.fixture()
def builder(container: Container) -> DependencyBuilder:
    """Default builder without locking."""
    return DependencyBuilder(container)


@pytest.fixture()
def thread_builder() -> DependencyBuilder:
    """Builder guarding singleton materialization with thread locks."""
    return DependencyBuilder(lock_mode=LockMode.THREAD)
