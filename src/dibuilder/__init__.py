from dibuilder.builder import DependencyBuilder
from dibuilder.container import Container, DefinitionsContainer, EmptyContainer
from dibuilder.container_interface import IBuilder, IContainer
from dibuilder.exceptions import (
    DIBuilderArgumentNotFoundError,
    DIBuilderError,
    DIBuilderInvalidArgumentError,
    DIBuilderInvalidRegistrationError,
    DIBuilderNotFoundError,
    DIBuilderObjectNotRegisteredError,
)
from dibuilder.lock_mode import LockMode
from dibuilder.recipes import Recipe
from dibuilder.scope import Scope
from dibuilder.singleton import SingletonHolder

__all__ = [
    "Container",
    "DIBuilderArgumentNotFoundError",
    "DIBuilderError",
    "DIBuilderInvalidArgumentError",
    "DIBuilderInvalidRegistrationError",
    "DIBuilderNotFoundError",
    "DIBuilderObjectNotRegisteredError",
    "DefinitionsContainer",
    "DependencyBuilder",
    "EmptyContainer",
    "IBuilder",
    "IContainer",
    "LockMode",
    "Recipe",
    "Scope",
    "SingletonHolder",
]
