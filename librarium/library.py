"""A catalogue of books indexed by title and by publication year."""

from __future__ import annotations

from typing import Optional

from librarium.avl import AVLTree
from librarium.book import Book


class DuplicateTitleError(ValueError):
    """Raised when a book with the same title is already catalogued."""


class Library:
    """Books indexed by title and by (year, title), with a lending log."""

    def __init__(self) -> None:
        self._by_title = AVLTree()
        self._by_year = AVLTree()
        self._history: list[tuple[str, str]] = []

    def __len__(self) -> int:
        return len(self._by_title)

    def add_book(self, book: Book) -> None:
        """Catalogue ``book``; raise DuplicateTitleError if its title is taken."""
        if book.title in self._by_title:
            raise DuplicateTitleError(
                f"a book titled {book.title!r} is already in the library"
            )
        self._by_title.insert(book.title, book)
        self._by_year.insert((book.year, book.title), book)

    def remove_book(self, title: str) -> bool:
        """Drop the book with ``title``; False if there is none."""
        book = self._by_title.get(title)
        if book is None:
            return False
        self._by_title.remove(title)
        self._by_year.remove((book.year, title))
        return True

    def search_by_title(self, title: str) -> Optional[Book]:
        """Return the book with exactly ``title``, or None."""
        return self._by_title.get(title)

    def search_by_year(self, year: int) -> list[Book]:
        """Return the books published in ``year``, ordered by title."""
        return list(self._by_year.values_between((year,), (year + 1,)))

    def check_out_book(self, title: str, username: str) -> bool:
        """Lend a copy of ``title`` to ``username``; False if impossible."""
        book = self._by_title.get(title)
        if book is None or not book.check_out(username):
            return False
        self._history.append((username, title))
        return True

    def return_book(self, title: str, username: str) -> bool:
        """Take back a copy of ``title``; False if unknown or none is out."""
        book = self._by_title.get(title)
        return book is not None and book.return_book()

    def all_books(self) -> list[Book]:
        """Return every book, ordered by title."""
        return [book for _, book in self._by_title.items()]

    def book_borrow_history(self, title: str) -> list[str]:
        """Return who borrowed ``title``, oldest first; empty if unknown."""
        book = self._by_title.get(title)
        return list(book.borrow_history) if book is not None else []

    def borrow_history(self) -> list[tuple[str, str]]:
        """Return every successful loan as ``(username, title)``, oldest first."""
        return list(self._history)