"""Container composition: merge module-level containers into one builder.

Each module declares its recipes in a ``DefinitionsContainer``. A container
registered later overrides names registered earlier.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dibuilder import DefinitionsContainer, DependencyBuilder, Scope


class Cache:
    def __init__(self, backend: str) -> None:
        self.backend = backend


class CoreDefinitions(DefinitionsContainer):
    def load_definitions(self) -> Mapping[str, Any]:
        return {
            "cache_backend": "memory",
            "Cache": (lambda b: Cache(b.build("cache_backend")), Scope.SINGLETON),
        }


class RedisPlugin(DefinitionsContainer):
    def load_definitions(self) -> Mapping[str, Any]:
        return {"cache_backend": "redis"}


def main() -> None:
    builder = DependencyBuilder()
    builder.register_container(CoreDefinitions())
    print(f"core={builder.build('cache_backend')}")  # => core=memory

    builder.register_container(RedisPlugin())
    cache = builder.build("Cache")
    print(f"plugin={cache.backend}")  # => plugin=redis
    print(f"shared={cache is builder.build('Cache')}")  # => shared=True


if __name__ == "__main__":
    main()
