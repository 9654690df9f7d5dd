"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass


@dataclass
class Article:
    """Core domain entity representing a short rich-text article."""

    title: str
    content: str
    id: int | None = None

    def update(self, title: str | None = None, content: str | None = None) -> None:
        """Overwrite article fields in place; id is left untouched."""
        if title is not None:
            self.title = title
        if content is not None:
            self.content = content
