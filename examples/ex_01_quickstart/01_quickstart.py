"""Quickstart: register recipes by name and resolve them.

Register a literal value and a factory, then let the builder resolve the
factory, which asks the builder for its own dependency.
"""

from __future__ import annotations

from dibuilder import DependencyBuilder, IBuilder


class Database:
    def __init__(self, dsn: str) -> None:
        self.dsn = dsn


class UserRepository:
    def __init__(self, database: Database) -> None:
        self.database = database


def main() -> None:
    builder = DependencyBuilder()
    container = builder.get_container()

    container.register_object("dsn", "sqlite:///app.db")
    container.register_object("Database", lambda b: Database(b.build("dsn")))

    def user_repository(b: IBuilder) -> UserRepository:
        return UserRepository(b.build("Database"))

    container.register_object("UserRepository", user_repository)

    repository = builder.build("UserRepository")
    print(f"dsn={repository.database.dsn}")  # => dsn=sqlite:///app.db

    repository = builder.UserRepository()
    print(f"dispatch={type(repository).__name__}")  # => dispatch=UserRepository


if __name__ == "__main__":
    main()
