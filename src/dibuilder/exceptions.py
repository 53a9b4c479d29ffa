from __future__ import annotations

from typing import Any


class DIBuilderError(Exception):
    """Represent a base class for all dibuilder-specific failures.

    Catch this type when you want to handle any dibuilder error path without
    matching each concrete exception class individually.
    """


class DIBuilderInvalidArgumentError(DIBuilderError):
    """Signal a key, name or option of the wrong type or form.

    Raised by ``DependencyBuilder.add_argument``, ``has_argument``,
    ``get_argument`` and ``build`` when the key is not a string, by ``build``
    when the name uses a reserved prefix, by ``set_scope`` for values that are
    not a ``Scope``, and by ``new_object`` when positional arguments are not
    passed as a list or tuple.
    """


class DIBuilderInvalidRegistrationError(DIBuilderError):
    """Signal an invalid object registration.

    Raised by ``Container.register_object`` when the name starts with a
    reserved prefix (``"arg_"`` or ``"sing_"``) or the scope is not a
    ``Scope``, and by ``DependencyBuilder.build`` when the entry stored under a
    name is not a ``(signature, scope)`` recipe.

    Typical fix is registering objects through ``register_object`` rather
    than writing raw values with ``Container.set``.
    """


class DIBuilderNotFoundError(DIBuilderError):
    """Signal that a container key is absent.

    Raised by ``Container.get``. Guard with ``Container.has`` when absence is
    an expected case.
    """

    def __init__(self, key: Any, message: str | None = None) -> None:
        self.key = key
        super().__init__(message or f"{key!r} is not set in the container")


class DIBuilderObjectNotRegisteredError(DIBuilderNotFoundError):
    """Signal resolution of a name that has no recipe.

    Raised by ``DependencyBuilder.build``, ``new_object``, ``resolve`` and
    dynamic dispatch. Typical fix is registering the name with
    ``Container.register_object`` or merging the container that defines it
    through ``DependencyBuilder.register_container``.
    """

    def __init__(self, key: str) -> None:
        super().__init__(key, f"{key!r} is not registered")


class DIBuilderArgumentNotFoundError(DIBuilderNotFoundError):
    """Signal retrieval of an argument that was never added.

    Raised by ``DependencyBuilder.get_argument``. Guard with
    ``has_argument`` when the argument is optional.
    """

    def __init__(self, key: str) -> None:
        super().__init__(key, f"{key!r} argument is invalid or unknown")
