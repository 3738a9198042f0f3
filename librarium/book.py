"""A single title held by the library, with its copies and loan record."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Book:
    """A catalogued title with a fixed number of copies."""

    title: str
    author: str
    year: int
    isbn: str
    genre: str
    total_copies: int
    available_copies: int = field(init=False)
    borrow_history: list[str] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.available_copies = self.total_copies

    @property
    def borrow_count(self) -> int:
        """How many times the book has been checked out."""
        return len(self.borrow_history)

    def check_out(self, username: str) -> bool:
        """Lend one copy to ``username``; False if no copy is on the shelf."""
        if self.available_copies <= 0:
            return False
        self.available_copies -= 1
        self.borrow_history.append(username)
        return True

    def return_book(self) -> bool:
        """Put one copy back; False if every copy is already on the shelf."""
        if self.available_copies >= self.total_copies:
            return False
        self.available_copies += 1
        return True

    def describe(self) -> str:
        """Return a multi-line, human-readable summary of the book."""
        return "\n".join(
            (
                f"Title: {self.title}",
                f"Author: {self.author}",
                f"Year: {self.year}",
                f"ISBN: {self.isbn}",
                f"Genre: {self.genre}",
                f"Available Copies: {self.available_copies} of {self.total_copies}",
                f"Times Borrowed: {self.borrow_count}",
            )
        )