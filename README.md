# librarium

A small library management system. Books are catalogued in two balanced
(AVL) search trees, one keyed by title and one by publication year and
title, so that lookups by title and by year stay fast however large the
collection grows. Each book tracks its copies and who has borrowed it.

## Installing

```
pip install .
```

## The interactive program

```
librarium
```

starts a menu-driven session on standard input and output:

1. Add a new book
2. Search for a book by published year
3. Check out a book
4. Return a book
5. List all books
6. Search by book title
7. View book borrow history
8. Remove a book
9. Exit

The command takes no options other than `--help`. Titles are unique: adding
a second book with a title already in the catalogue is refused. A year or a
number of copies that is not a whole number is reported as invalid and the
book is not added. The session ends when you choose 9 or when the input runs
out.

`librarium.cli.run(library, infile, outfile)` drives the same menu over any
`Library` and any pair of text streams.

## Using it from Python

```python
from librarium.book import Book
from librarium.library import Library, DuplicateTitleError

library = Library()
library.add_book(Book("Dune", "Frank Herbert", 1965, "isbn-0001", "Science Fiction", 2))
library.add_book(Book("Emma", "Jane Austen", 1815, "isbn-0002", "Novel", 1))

library.check_out_book("Dune", "alice")      # True
library.check_out_book("Emma", "bob")        # True
library.check_out_book("Emma", "carol")      # False: no copies left
library.return_book("Emma", "bob")           # True

[b.title for b in library.all_books()]       # ['Dune', 'Emma']
[b.title for b in library.search_by_year(1965)]  # ['Dune']
library.book_borrow_history("Dune")          # ['alice']
library.borrow_history()                     # [('alice', 'Dune'), ('bob', 'Emma')]

library.remove_book("Emma")                  # True
library.search_by_title("Emma")              # None

try:
    library.add_book(Book("Dune", "Someone Else", 2000, "isbn-0003", "Other", 1))
except DuplicateTitleError:
    pass
```

A `Book` has `title`, `author`, `year`, `isbn`, `genre`, `total_copies`,
`available_copies`, `borrow_history` and `borrow_count`. `check_out(username)`
and `return_book()` return `False` when no copy is on the shelf or none is
out. `describe()` returns the multi-line summary shown by the interactive
program.

`librarium.avl.AVLTree` is the self-balancing ordered map both indexes are
built on, and can be used on its own with any mutually comparable keys:
`insert` raises `KeyError` for a key already present, `remove` raises
`KeyError` for a missing key and returns the removed value, `get` returns
`None` for a missing key, `items()` yields pairs in key order, and
`values_between(low, high)` yields values with `low <= key < high`.

## What it does not do

The catalogue lives only in memory: nothing is saved to disk, and every
session of the `librarium` command starts with an empty library.

## Running the tests

```
pip install ".[test]"
pytest
```