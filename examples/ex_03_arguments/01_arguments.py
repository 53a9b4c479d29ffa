"""Arguments: hand construction parameters to factories.

Factories read arguments through ``builder.get_argument``. Arguments are added
explicitly, by keyword, or keyed by the type name of positional values.
"""

from __future__ import annotations

from dibuilder import DependencyBuilder


class Title:
    def __init__(self, text: str) -> None:
        self.text = text


class Page:
    def __init__(self, title: Title, language: str) -> None:
        self.title = title
        self.language = language


def main() -> None:
    builder = DependencyBuilder()
    builder.get_container().register_object(
        "Page",
        lambda b: Page(
            b.get_argument("Title"),
            b.get_argument("language") if b.has_argument("language") else "en",
        ),
    )

    page = builder.add_argument("Title", Title("Explicit")).build("Page")
    print(f"explicit={page.title.text}/{page.language}")  # => explicit=Explicit/en

    page = builder.new_object("Page", [Title("Positional")], language="de")
    print(f"positional={page.title.text}/{page.language}")  # => positional=Positional/de

    page = builder.Page(Title("Dispatched"))
    print(f"dispatched={page.title.text}/{page.language}")  # => dispatched=Dispatched/de


if __name__ == "__main__":
    main()
