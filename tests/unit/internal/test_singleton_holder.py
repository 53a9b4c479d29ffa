from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from dibuilder.lock_mode import LockMode
from dibuilder.singleton import SingletonHolder


def test_holder_computes_value_once() -> None:
    calls: list[int] = []

    def factory() -> object:
        calls.append(1)
        return object()

    holder = SingletonHolder(factory)

    assert not holder.resolved
    first = holder.get()
    assert holder.resolved
    assert holder() is first
    assert holder(object()) is first
    assert len(calls) == 1


def test_failed_factory_leaves_holder_unresolved() -> None:
    attempts: list[int] = []

    def factory() -> str:
        attempts.append(1)
        if len(attempts) == 1:
            msg = "not yet"
            raise RuntimeError(msg)
        return "ready"

    holder = SingletonHolder(factory)

    with pytest.raises(RuntimeError, match="not yet"):
        holder.get()
    assert not holder.resolved
    assert holder.get() == "ready"


def test_thread_lock_mode_computes_once_under_contention() -> None:
    calls: list[int] = []
    start = threading.Barrier(8)

    def factory() -> object:
        calls.append(1)
        return object()

    holder = SingletonHolder(factory, lock_mode=LockMode.THREAD)

    def resolve(_: int) -> object:
        start.wait()
        return holder.get()

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(resolve, range(8)))

    assert all(result is results[0] for result in results)
    assert len(calls) == 1


def test_repr_reports_state() -> None:
    holder = SingletonHolder(lambda: 42)

    assert repr(holder) == "SingletonHolder(unresolved)"
    holder.get()
    assert repr(holder) == "SingletonHolder(resolved(42))"
