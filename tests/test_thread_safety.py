"""Tests for thread safety of DependencyBuilder in LockMode.THREAD."""

import threading
import time
from concurrent.futures import ThreadPoolExecutor

from dibuilder.builder import DependencyBuilder
from dibuilder.scope import Scope


class PlainService:
    pass


class SlowService:
    instances = 0
    instances_lock = threading.Lock()

    def __init__(self) -> None:
        time.sleep(0.01)
        with SlowService.instances_lock:
            SlowService.instances += 1


class TestConcurrentResolution:
    def test_concurrent_singleton_resolution_materializes_once(
        self,
        thread_builder: DependencyBuilder,
    ) -> None:
        """Concurrent singleton resolution returns the same instance."""
        SlowService.instances = 0
        thread_builder.get_container().register_object("Slow", SlowService, Scope.SINGLETON)

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: thread_builder.build("Slow"), range(16)))

        assert all(result is results[0] for result in results)
        assert SlowService.instances == 1

    def test_concurrent_prototype_resolution_different_instances(
        self,
        thread_builder: DependencyBuilder,
    ) -> None:
        """Concurrent prototype resolution creates different instances."""
        thread_builder.get_container().register_object("Service", PlainService)

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(lambda _: thread_builder.build("Service"), range(16)))

        assert len({id(result) for result in results}) == 16

    def test_nested_singletons_do_not_deadlock(self, thread_builder: DependencyBuilder) -> None:
        """Singleton factories resolving other singletons re-enter the builder lock."""
        container = thread_builder.get_container()
        container.register_object("Inner", PlainService, Scope.SINGLETON)
        container.register_object(
            "Outer",
            lambda b: ("outer", b.build("Inner")),
            Scope.SINGLETON,
        )

        outer = thread_builder.build("Outer")

        assert outer[1] is thread_builder.build("Inner")
