"""Scopes: ``PROTOTYPE`` and ``SINGLETON``.

See how object identity changes across repeated resolutions, and how
``set_scope`` overrides the registered scope for one resolution only.
"""

from __future__ import annotations

import itertools

from dibuilder import DependencyBuilder, Scope


class Session:
    pass


def main() -> None:
    builder = DependencyBuilder()
    container = builder.get_container()

    container.register_object("Session", Session, Scope.PROTOTYPE)
    first = builder.build("Session")
    second = builder.build("Session")
    print(f"prototype_new={first is not second}")  # => prototype_new=True

    container.register_object("SharedSession", Session, Scope.SINGLETON)
    first = builder.build("SharedSession")
    second = builder.build("SharedSession")
    print(f"singleton_same={first is second}")  # => singleton_same=True

    counter = itertools.count(1)
    container.register_object("Counter", lambda: next(counter), Scope.SINGLETON)
    print(f"singleton_counter={[builder.build('Counter') for _ in range(2)]}")  # => singleton_counter=[1, 1]

    tickets = itertools.count(1)
    container.register_object("Ticket", lambda: next(tickets))
    forced = builder.set_scope(Scope.SINGLETON).build("Ticket")
    following = builder.build("Ticket")
    print(f"override_once={forced},{following}")  # => override_once=1,2


if __name__ == "__main__":
    main()
