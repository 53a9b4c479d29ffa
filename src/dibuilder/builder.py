from __future__ import annotations

import functools
import logging
import threading
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from dibuilder.container import EmptyContainer
from dibuilder.container_interface import IBuilder, IContainer
from dibuilder.defaults import ARGUMENT_PREFIX, DEFAULT_LOCK_MODE, SINGLETON_PREFIX
from dibuilder.exceptions import (
    DIBuilderArgumentNotFoundError,
    DIBuilderInvalidArgumentError,
    DIBuilderObjectNotRegisteredError,
)
from dibuilder.lock_mode import LockMode
from dibuilder.recipes import Signature, as_recipe, invoke_signature, is_reserved_name
from dibuilder.scope import Scope
from dibuilder.singleton import SingletonHolder

if TYPE_CHECKING:
    from typing_extensions import Self

logger = logging.getLogger(__name__)


class DependencyBuilder(IBuilder):
    """Resolve registered names into objects.

    The builder owns one container, usually grown by merging other containers
    into it with ``register_container`` or by registering recipes on
    ``get_container()`` directly. Resolution looks up the recipe of a name,
    applies the one-shot scope override set with ``set_scope`` and calls the
    factory with the builder itself, so factories can read arguments added
    with ``add_argument`` or resolve further names.

    Singleton-scoped objects are memoized in the owned container, which makes
    "singleton" mean singleton for the lifetime of that container. Create one
    builder per logical unit of work (for example one request).

    Registered names can also be resolved as if they were methods::

        builder.Page(title)  # same as builder.new_object("Page", [title])
    """

    def __init__(
        self,
        container: IContainer | None = None,
        *,
        lock_mode: LockMode = DEFAULT_LOCK_MODE,
    ) -> None:
        """Initialize a builder over ``container``.

        Args:
            container: Container to own. An ``EmptyContainer`` is used when
                omitted so registration can start right away.
            lock_mode: ``LockMode.THREAD`` guards singleton materialization
                with a reentrant lock for builders shared between threads.
                The one-shot scope override is not guarded in either mode.

        """
        self._container: IContainer = container if container is not None else EmptyContainer()
        self._scope_override: Scope | None = None
        self._lock_mode = lock_mode
        self._lock = threading.RLock() if lock_mode is LockMode.THREAD else None

    @property
    def container(self) -> IContainer:
        return self._container

    def register_container(self, container: IContainer) -> None:
        """Merge all entries of ``container`` into the owned container.

        Entries of ``container`` win over existing ones with the same key, so
        a container registered later can override a name registered earlier.
        """
        self._container.merge(container.to_dict())

    def get_container(self) -> IContainer:
        return self._container

    def add_argument(self, key: str, value: Any) -> Self:
        self._ensure_argument_key(key)
        self._container.set(ARGUMENT_PREFIX + key, value)
        logger.debug("Added argument %r", key)
        return self

    def has_argument(self, key: str) -> bool:
        self._ensure_argument_key(key)
        return self._container.has(ARGUMENT_PREFIX + key)

    def get_argument(self, key: str) -> Any:
        """Return the argument stored under ``key``.

        Raises:
            DIBuilderInvalidArgumentError: If ``key`` is not a string.
            DIBuilderArgumentNotFoundError: If no argument was added under ``key``.

        """
        if not self.has_argument(key):
            raise DIBuilderArgumentNotFoundError(key)
        return self._container.get(ARGUMENT_PREFIX + key)

    def set_scope(self, scope: Scope | None) -> Self:
        """Override the registered scope for the next ``build`` call only.

        Example:
            builder.set_scope(Scope.SINGLETON).new_object("Page")

        """
        if scope is not None and not isinstance(scope, Scope):
            msg = f"Scope override must be a Scope member, got {scope!r}"
            raise DIBuilderInvalidArgumentError(msg)
        self._scope_override = scope
        return self

    def new_object(
        self,
        name: str,
        arguments: Sequence[Any] | None = None,
        /,
        **named_arguments: Any,
    ) -> Any:
        """Add arguments, then resolve ``name``.

        Each element of ``arguments`` is added under the name of its type, so
        a factory receives it with ``builder.get_argument("Title")`` when a
        ``Title`` instance is passed. Keyword arguments are added under their
        own keys.

        Example:
            page = builder.new_object("Page", [title])
            page = builder.new_object("Page", Title=title)

        """
        self._set_arguments(arguments, named_arguments)
        return self.build(name)

    def resolve(
        self,
        name: str,
        arguments: Sequence[Any] | None = None,
        /,
        **named_arguments: Any,
    ) -> Any:
        """Resolve ``name`` explicitly; the same as dynamic dispatch on the builder."""
        return self.new_object(name, arguments, **named_arguments)

    def build(self, name: str) -> Any:
        """Resolve ``name`` into an object honoring its scope.

        The scope override is consumed by every call, including failing and
        nested ones.

        Raises:
            DIBuilderInvalidArgumentError: If ``name`` is not a string or
                starts with a reserved prefix.
            DIBuilderObjectNotRegisteredError: If ``name`` has no recipe.
            DIBuilderInvalidRegistrationError: If the entry under ``name`` is
                not a recipe.

        """
        scope_override, self._scope_override = self._scope_override, None

        if not isinstance(name, str):
            msg = f"Object name must be a string, got {type(name).__name__}"
            raise DIBuilderInvalidArgumentError(msg)
        if is_reserved_name(name):
            msg = f"Object name {name!r} uses a reserved prefix"
            raise DIBuilderInvalidArgumentError(msg)
        if not self._container.has(name):
            raise DIBuilderObjectNotRegisteredError(name)

        signature, registered_scope = as_recipe(name, self._container.get(name))
        scope = scope_override if scope_override is not None else registered_scope

        if scope is Scope.SINGLETON:
            signature = self._singleton_signature(name, signature)

        return invoke_signature(signature, self)

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if name.startswith("_"):
            msg = f"{type(self).__name__!r} object has no attribute {name!r}"
            raise AttributeError(msg)

        def dispatch(*arguments: Any, **named_arguments: Any) -> Any:
            return self.new_object(name, list(arguments), **named_arguments)

        dispatch.__name__ = dispatch.__qualname__ = name
        return dispatch

    def __repr__(self) -> str:
        return f"{type(self).__name__}(container={self._container!r}, lock_mode={self._lock_mode})"

    def _set_arguments(
        self,
        arguments: Sequence[Any] | None,
        named_arguments: Mapping[str, Any],
    ) -> None:
        if arguments is not None:
            if not isinstance(arguments, (list, tuple)):
                msg = f"Object arguments must be a list or tuple, got {type(arguments).__name__}"
                raise DIBuilderInvalidArgumentError(msg)
            for value in arguments:
                self.add_argument(type(value).__name__, value)

        for key, value in named_arguments.items():
            self.add_argument(key, value)

    def _singleton_signature(self, name: str, signature: Signature) -> Any:
        key = SINGLETON_PREFIX + name
        if self._lock is None:
            return self._load_singleton(key, signature)
        with self._lock:
            return self._load_singleton(key, signature)

    def _load_singleton(self, key: str, signature: Signature) -> Any:
        if not self._container.has(key):
            holder = SingletonHolder(
                functools.partial(invoke_signature, signature, self),
                lock_mode=self._lock_mode,
            )
            holder.get()
            self._container.set(key, holder)
            logger.debug("Materialized singleton %r", key)

        return self._container.get(key)

    def _ensure_argument_key(self, key: Any) -> None:
        if not isinstance(key, str):
            msg = f"Argument key must be a string, got {type(key).__name__}"
            raise DIBuilderInvalidArgumentError(msg)
