from __future__ import annotations

import logging
from abc import abstractmethod
from collections.abc import Iterator, Mapping
from typing import TYPE_CHECKING, Any

from dibuilder.container_interface import IContainer
from dibuilder.defaults import DEFAULT_SCOPE
from dibuilder.exceptions import (
    DIBuilderInvalidArgumentError,
    DIBuilderInvalidRegistrationError,
    DIBuilderNotFoundError,
)
from dibuilder.recipes import Recipe, is_reserved_name
from dibuilder.scope import Scope

if TYPE_CHECKING:
    from typing_extensions import Self

    from dibuilder.recipes import Signature

logger = logging.getLogger(__name__)


class Container(IContainer):
    """Hold object recipes, injected arguments and singleton holders.

    Entries share one insertion-ordered mapping. Keys are partitioned by
    convention: a plain name maps to a ``Recipe``, ``"arg_" + key`` to an
    argument added through the builder and ``"sing_" + name`` to the
    ``SingletonHolder`` of a singleton-scoped object. ``set`` and ``merge``
    store values as given; use ``register_object`` to register recipes with
    name and scope validation.

    Containers only grow. Merging one container's ``to_dict()`` into another
    carries all three namespaces along, and the merged entries win on key
    collisions.
    """

    def __init__(self, entries: Mapping[str, Any] | None = None) -> None:
        self._entries: dict[str, Any] = {}
        if entries is not None:
            self.merge(entries)

    def has(self, key: str) -> bool:
        return key in self._entries

    def get(self, key: str) -> Any:
        try:
            return self._entries[key]
        except KeyError:
            raise DIBuilderNotFoundError(key) from None

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = value

    def merge(self, entries: Mapping[str, Any]) -> None:
        self._entries.update(entries)
        logger.debug("Merged %d entries into %r", len(entries), self)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._entries)

    def register_object(
        self,
        name: str,
        signature: Signature,
        scope: Scope = DEFAULT_SCOPE,
    ) -> Self:
        """Register ``signature`` under ``name`` with the given scope.

        The signature is either a literal value or a factory. Factories taking
        a positional parameter are called with the resolving builder, so they
        can read arguments or resolve further names; factories without
        parameters are called as is.

        Example:
            container.register_object("Title", Title("Main page"))
            container.register_object(
                "Page",
                lambda builder: Page(builder.get_argument("Title")),
                Scope.SINGLETON,
            )

        Raises:
            DIBuilderInvalidArgumentError: If ``name`` is not a string.
            DIBuilderInvalidRegistrationError: If ``name`` starts with a
                reserved prefix or ``scope`` is not a ``Scope``.

        """
        if not isinstance(name, str):
            msg = f"Object name must be a string, got {type(name).__name__}"
            raise DIBuilderInvalidArgumentError(msg)
        if is_reserved_name(name):
            msg = f"Object name {name!r} uses a reserved prefix"
            raise DIBuilderInvalidRegistrationError(msg)
        if not isinstance(scope, Scope):
            msg = f"Scope of {name!r} must be a Scope member, got {scope!r}"
            raise DIBuilderInvalidRegistrationError(msg)

        self._entries[name] = Recipe(signature, scope)
        logger.debug("Registered %r with scope %s", name, scope.name)
        return self

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __setitem__(self, name: str, signature: Signature) -> None:
        self.register_object(name, signature)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(entries={len(self._entries)})"


class EmptyContainer(Container):
    """A container that starts without entries."""

    def __init__(self) -> None:
        super().__init__()


class DefinitionsContainer(Container):
    """A container whose subclasses declare their recipes up front.

    Subclass it per module or plugin, and merge instances into a builder with
    ``DependencyBuilder.register_container``::

        class StoreDefinitions(DefinitionsContainer):
            def load_definitions(self):
                return {
                    "Settings": Settings.from_env,
                    "Store": (lambda builder: Store(builder.build("Settings")), Scope.SINGLETON),
                }

    A definition is either a signature (registered with prototype scope) or a
    ``(signature, scope)`` pair.
    """

    def __init__(self) -> None:
        super().__init__()
        for name, definition in self.load_definitions().items():
            if (
                isinstance(definition, tuple)
                and len(definition) == 2  # noqa: PLR2004
                and isinstance(definition[1], Scope)
            ):
                self.register_object(name, definition[0], definition[1])
            else:
                self.register_object(name, definition)

    @abstractmethod
    def load_definitions(self) -> Mapping[str, Any]:
        """Return the recipes of this container keyed by object name."""
