from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from dibuilder.scope import Scope

if TYPE_CHECKING:
    from typing_extensions import Self

    from dibuilder.recipes import Signature


class IContainer(ABC):
    """Interface for container-like objects."""

    @abstractmethod
    def has(self, key: str) -> bool:
        """Return whether ``key`` is present, regardless of namespace."""

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the value stored under ``key``."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Insert or overwrite the value stored under ``key``."""

    @abstractmethod
    def merge(self, entries: Mapping[str, Any]) -> None:
        """Union exported entries into this container, last write wins."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return a snapshot of all current entries."""

    @abstractmethod
    def register_object(
        self,
        name: str,
        signature: Signature,
        scope: Scope = Scope.PROTOTYPE,
    ) -> Self:
        """Register a recipe under an object name."""


class IBuilder(ABC):
    """Interface for builder-like objects handed to factories."""

    @abstractmethod
    def register_container(self, container: IContainer) -> None:
        """Merge the entries of another container into the owned one."""

    @abstractmethod
    def get_container(self) -> IContainer:
        """Return the owned container."""

    @abstractmethod
    def add_argument(self, key: str, value: Any) -> Self:
        """Store an argument for factories to read."""

    @abstractmethod
    def has_argument(self, key: str) -> bool:
        """Return whether an argument is stored under ``key``."""

    @abstractmethod
    def get_argument(self, key: str) -> Any:
        """Return the argument stored under ``key``."""

    @abstractmethod
    def set_scope(self, scope: Scope | None) -> Self:
        """Override the registered scope for the next resolution only."""

    @abstractmethod
    def new_object(
        self,
        name: str,
        arguments: Sequence[Any] | None = None,
        /,
        **named_arguments: Any,
    ) -> Any:
        """Register arguments, then resolve ``name``."""

    @abstractmethod
    def build(self, name: str) -> Any:
        """Resolve ``name`` into an object honoring its scope."""
