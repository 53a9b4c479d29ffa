from __future__ import annotations

import pytest

from dibuilder.builder import DependencyBuilder
from dibuilder.container import Container, EmptyContainer


@pytest.fixture()
def dibuilder_container() -> Container:
    """Create the per-test container owned by the ``dibuilder`` fixture.

    Override this fixture in a test module or ``conftest.py`` to pre-register
    recipes or to return a ``DefinitionsContainer`` subclass.

    Returns:
        A new ``EmptyContainer`` instance.

    """
    return EmptyContainer()


@pytest.fixture()
def dibuilder(dibuilder_container: Container) -> DependencyBuilder:
    """Create a per-test builder over ``dibuilder_container``.

    The fixture is function-scoped, so arguments and singletons are isolated
    between tests unless users override fixture scope explicitly.
    """
    return DependencyBuilder(dibuilder_container)
