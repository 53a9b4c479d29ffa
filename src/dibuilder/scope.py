from __future__ import annotations

from enum import Enum, auto


class Scope(Enum):
    """Define how long a resolved object is kept by the builder.

    Pass a value to ``Container.register_object`` to pick the registered
    scope of a name, or to ``DependencyBuilder.set_scope`` to override it for
    the next resolution only.
    """

    PROTOTYPE = auto()
    """A new object is created every time the name is resolved."""

    SINGLETON = auto()
    """The object is created once and shared for the lifetime of the container."""
