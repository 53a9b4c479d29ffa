from __future__ import annotations

import inspect
from collections.abc import Callable
from inspect import Parameter
from typing import TYPE_CHECKING, Any, NamedTuple, TypeAlias

from dibuilder.defaults import DEFAULT_SCOPE, RESERVED_PREFIXES
from dibuilder.exceptions import DIBuilderInvalidRegistrationError
from dibuilder.scope import Scope

if TYPE_CHECKING:
    from dibuilder.container_interface import IBuilder

Signature: TypeAlias = Any
"""A literal value, or a factory called with the builder (or with nothing)."""


_POSITIONAL_KINDS = (
    Parameter.POSITIONAL_ONLY,
    Parameter.POSITIONAL_OR_KEYWORD,
)


class Recipe(NamedTuple):
    """Describe how to construct an object and how long to keep it alive."""

    signature: Signature
    """The literal value or the factory producing the object."""

    scope: Scope = DEFAULT_SCOPE
    """The registered scope of the object."""


def is_reserved_name(name: str) -> bool:
    """Return whether ``name`` falls into a namespace reserved by the container."""
    return name.startswith(RESERVED_PREFIXES)


def as_recipe(name: str, entry: Any) -> Recipe:
    """Validate a container entry stored under an object name."""
    if isinstance(entry, tuple) and len(entry) == 2 and isinstance(entry[1], Scope):  # noqa: PLR2004
        return Recipe(*entry)

    msg = (
        f"Entry registered under {name!r} is not a (signature, Scope) recipe: {entry!r}. "
        "Register objects with Container.register_object()."
    )
    raise DIBuilderInvalidRegistrationError(msg)


def accepts_builder(factory: Callable[..., Any]) -> bool:
    """Return whether ``factory`` takes the builder as its positional argument.

    A factory takes it through a required positional parameter or through
    ``*args``; optional positional parameters keep their defaults. Classes
    without an introspectable signature (``dict``, ``set``) are instantiated
    bare; other such callables are assumed to take it.
    """
    try:
        parameters = inspect.signature(factory).parameters.values()
    except (TypeError, ValueError):
        return not isinstance(factory, type)
    return any(_takes_builder(parameter) for parameter in parameters)


def _takes_builder(parameter: Parameter) -> bool:
    if parameter.kind is Parameter.VAR_POSITIONAL:
        return True
    return parameter.kind in _POSITIONAL_KINDS and parameter.default is Parameter.empty


def invoke_signature(signature: Signature, builder: IBuilder) -> Any:
    """Call a factory signature, or return a literal one unchanged."""
    if not callable(signature):
        return signature
    if accepts_builder(signature):
        return signature(builder)
    return signature()
