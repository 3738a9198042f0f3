"""Interactive, menu-driven front end for a :class:`Library`."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence, TextIO

from librarium.book import Book
from librarium.library import DuplicateTitleError, Library

SEPARATOR = "------------------------"

MENU = (
    "\n========== Library Management System ==========\n"
    "1. Add a new book\n"
    "2. Search for a book by published year\n"
    "3. Check out a book\n"
    "4. Return a book\n"
    "5. List all books\n"
    "6. Search by book title\n"
    "7. View book borrow history\n"
    "8. Remove a book\n"
    "9. Exit\n"
    "=============================================\n"
    "Enter your choice: "
)


class _EndOfInput(Exception):
    """The input stream ran out while a line was expected."""


class _Session:
    """One conversation between a library and a pair of text streams."""

    def __init__(self, library: Library, infile: TextIO, outfile: TextIO) -> None:
        self.library = library
        self.infile = infile
        self.outfile = outfile

    def say(self, text: str = "") -> None:
        self.outfile.write(text + "\n")

    def ask(self, prompt: str) -> str:
        self.outfile.write(prompt)
        self.outfile.flush()
        line = self.infile.readline()
        if not line:
            raise _EndOfInput
        return line.rstrip("\r\n")

    def ask_int(self, prompt: str) -> Optional[int]:
        try:
            return int(self.ask(prompt).strip())
        except ValueError:
            return None

    def show(self, book: Book) -> None:
        self.say(book.describe())

    def add(self) -> None:
        title = self.ask("Enter book title: ")
        author = self.ask("Enter author: ")
        year = self.ask_int("Enter published year: ")
        if year is None:
            self.say("Invalid year.")
            return
        isbn = self.ask("Enter ISBN: ")
        genre = self.ask("Enter genre: ")
        copies = self.ask_int("Enter number of copies: ")
        if copies is None:
            self.say("Invalid number of copies.")
            return
        try:
            self.library.add_book(Book(title, author, year, isbn, genre, copies))
        except DuplicateTitleError:
            self.say("You can't add the title which has been added into the library")
            return
        self.say("Book added successfully!")

    def by_year(self) -> None:
        year = self.ask_int("Enter published year to search: ")
        if year is None:
            self.say("Invalid year.")
            return
        results = self.library.search_by_year(year)
        if not results:
            self.say(f"No books found from year {year}")
            return
        self.say(f"Books published in {year}:")
        for book in results:
            self.show(book)
            self.say(SEPARATOR)

    def check_out(self) -> None:
        title = self.ask("Enter the title of the book to check out: ")
        username = self.ask("Enter your username: ")
        if self.library.check_out_book(title, username):
            self.say(f"Book '{title}' checked out successfully!")
        else:
            self.say(
                "Failed to check out book. Either the book doesn't exist "
                "or all copies are already checked out."
            )

    def give_back(self) -> None:
        title = self.ask("Enter the title of the book to return: ")
        username = self.ask("Enter your username: ")
        if self.library.return_book(title, username):
            self.say(f"Book '{title}' returned successfully!")
        else:
            self.say(
                "Failed to return book. The book may not exist or wasn't checked out."
            )

    def list_all(self) -> None:
        books = self.library.all_books()
        if not books:
            self.say("The library is currently empty.")
            return
        self.say("All Books in the Library:")
        self.say(SEPARATOR)
        for book in books:
            self.show(book)
            self.say(SEPARATOR)

    def by_title(self) -> None:
        title = self.ask("Enter the title of the book to search: ")
        book = self.library.search_by_title(title)
        if book is None:
            self.say("Book not found.")
            return
        self.say("Book found:")
        self.show(book)

    def history(self) -> None:
        title = self.ask("Enter the title of the book to view borrow history: ")
        names = self.library.book_borrow_history(title)
        if not names:
            self.say("No borrowing history for this book.")
            return
        self.say(f"Borrowing history for '{title}':")
        for name in names:
            self.say(f"- {name}")

    def remove(self) -> None:
        title = self.ask("Enter the title of the book to remove: ")
        if self.library.remove_book(title):
            self.say(f"Book '{title}' removed successfully!")
        else:
            self.say("Failed to remove book. The book may not exist in the library.")

    def loop(self) -> None:
        actions = {
            1: self.add,
            2: self.by_year,
            3: self.check_out,
            4: self.give_back,
            5: self.list_all,
            6: self.by_title,
            7: self.history,
            8: self.remove,
        }
        try:
            while True:
                choice = self.ask_int(MENU)
                if choice == 9:
                    self.say("Thank you for using the Library Management System!")
                    return
                action = actions.get(choice) if choice is not None else None
                if action is None:
                    self.say("Invalid choice. Please try again.")
                else:
                    action()
        except _EndOfInput:
            self.say()


def run(library: Library, infile: TextIO, outfile: TextIO) -> None:
    """Drive the menu over ``library`` until the user exits or input ends."""
    _Session(library, infile, outfile).loop()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start an interactive session on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="librarium", description="Interactive library management system."
    )
    parser.parse_args(argv)
    run(Library(), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())