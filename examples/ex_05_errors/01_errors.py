"""Errors: what the builder raises and how to guard against it.

Every error derives from ``DIBuilderError``. Missing names and arguments raise
``DIBuilderNotFoundError`` subclasses; use ``has``/``has_argument`` when
absence is expected.
"""

from __future__ import annotations

from dibuilder import (
    DependencyBuilder,
    DIBuilderArgumentNotFoundError,
    DIBuilderInvalidArgumentError,
    DIBuilderInvalidRegistrationError,
    DIBuilderObjectNotRegisteredError,
)


def main() -> None:
    builder = DependencyBuilder()

    try:
        builder.build("Mailer")
    except DIBuilderObjectNotRegisteredError as error:
        print(f"not_registered={error.key}")  # => not_registered=Mailer

    try:
        builder.get_argument("Title")
    except DIBuilderArgumentNotFoundError as error:
        print(f"missing_argument={error.key}")  # => missing_argument=Title

    try:
        builder.add_argument(42, "value")  # type: ignore[arg-type]
    except DIBuilderInvalidArgumentError:
        print("invalid_key=True")  # => invalid_key=True

    try:
        builder.get_container().register_object("sing_Mailer", object())
    except DIBuilderInvalidRegistrationError:
        print("reserved_name=True")  # => reserved_name=True

    mailer = builder.build("Mailer") if builder.get_container().has("Mailer") else None
    print(f"guarded={mailer}")  # => guarded=None


if __name__ == "__main__":
    main()
