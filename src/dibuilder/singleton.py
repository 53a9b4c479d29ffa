"""Memoizing cell backing singleton-scoped objects.

A holder is stored under ``"sing_" + name`` the first time a name is resolved
with singleton scope. It is either unresolved (it has a factory and no value
yet) or resolved (it has a value and no factory anymore).
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Any, cast

from dibuilder.lock_mode import LockMode

_UNRESOLVED: Any = object()


class SingletonHolder:
    """Compute a value at most once and return the same instance afterwards."""

    __slots__ = ("_factory", "_lock", "_value")

    def __init__(
        self,
        factory: Callable[[], Any],
        *,
        lock_mode: LockMode = LockMode.NONE,
    ) -> None:
        self._factory: Callable[[], Any] | None = factory
        self._value: Any = _UNRESOLVED
        self._lock = threading.Lock() if lock_mode is LockMode.THREAD else None

    @property
    def resolved(self) -> bool:
        return self._value is not _UNRESOLVED

    def get(self) -> Any:
        """Return the memoized value, computing it on first access."""
        if self._value is not _UNRESOLVED:
            return self._value

        if self._lock is None:
            return self._resolve()

        with self._lock:
            if self._value is not _UNRESOLVED:
                return self._value
            return self._resolve()

    def __call__(self, _builder: Any = None) -> Any:
        return self.get()

    def __repr__(self) -> str:
        state = f"resolved({self._value!r})" if self.resolved else "unresolved"
        return f"SingletonHolder({state})"

    def _resolve(self) -> Any:
        value = cast("Callable[[], Any]", self._factory)()
        self._value = value
        self._factory = None
        return value
