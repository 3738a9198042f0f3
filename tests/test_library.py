import pytest

from librarium.book import Book
from librarium.library import DuplicateTitleError, Library


def make(title, year, copies=1):
    return Book(title, "Some Author", year, f"isbn-{title}", "Fiction", copies)


@pytest.fixture
def library():
    lib = Library()
    for title, year in [
        ("Neuromancer", 1984),
        ("Dune", 1965),
        ("Hyperion", 1989),
        ("Contact", 1985),
        ("Brave New World", 1932),
        ("Count Zero", 1986),
        ("Emma", 1815),
        ("Akira", 1984),
    ]:
        lib.add_book(make(title, year, copies=2))
    return lib


def test_search_by_title_finds_added_book():
    lib = Library()
    book = make("Dune", 1965)
    lib.add_book(book)
    assert lib.search_by_title("Dune") is book
    assert lib.search_by_title("Missing") is None


def test_duplicate_title_is_rejected_everywhere(library):
    before = [b.title for b in library.all_books()]
    with pytest.raises(DuplicateTitleError):
        library.add_book(make("Dune", 2021))
    assert [b.title for b in library.all_books()] == before
    assert library.search_by_year(2021) == []


def test_all_books_sorted_by_title(library):
    titles = [b.title for b in library.all_books()]
    assert titles == sorted(titles)
    assert len(titles) == len(library)


def test_search_by_year_returns_that_year_ordered_by_title(library):
    found = library.search_by_year(1984)
    assert [b.title for b in found] == ["Akira", "Neuromancer"]
    assert all(b.year == 1984 for b in found)
    assert library.search_by_year(1700) == []


def test_remove_book_from_both_indexes(library):
    assert library.remove_book("Neuromancer") is True
    assert library.search_by_title("Neuromancer") is None
    assert [b.title for b in library.search_by_year(1984)] == ["Akira"]
    assert "Neuromancer" not in [b.title for b in library.all_books()]


def test_remove_missing_book_fails(library):
    count = len(library)
    assert library.remove_book("Missing") is False
    assert len(library) == count


def test_removed_title_can_be_added_again(library):
    library.remove_book("Dune")
    library.add_book(make("Dune", 2021))
    assert library.search_by_title("Dune").year == 2021
    assert library.search_by_year(1965) == []


def test_check_out_records_history(library):
    assert library.check_out_book("Dune", "alice") is True
    assert library.check_out_book("Emma", "bob") is True
    assert library.book_borrow_history("Dune") == ["alice"]
    assert library.borrow_history() == [("alice", "Dune"), ("bob", "Emma")]


def test_check_out_fails_for_unknown_or_exhausted(library):
    assert library.check_out_book("Missing", "alice") is False
    assert library.check_out_book("Dune", "alice")
    assert library.check_out_book("Dune", "bob")
    assert library.check_out_book("Dune", "carol") is False
    assert library.borrow_history() == [("alice", "Dune"), ("bob", "Dune")]


def test_checkout_state_visible_through_year_search(library):
    library.check_out_book("Dune", "alice")
    (dune,) = library.search_by_year(1965)
    assert dune.available_copies == dune.total_copies - 1


def test_return_book(library):
    assert library.return_book("Dune", "alice") is False
    library.check_out_book("Dune", "alice")
    assert library.return_book("Dune", "alice") is True
    book = library.search_by_title("Dune")
    assert book.available_copies == book.total_copies
    assert library.return_book("Missing", "alice") is False


def test_book_borrow_history_unknown_title_is_empty(library):
    assert library.book_borrow_history("Missing") == []


def test_histories_are_copies(library):
    library.check_out_book("Emma", "alice")
    library.borrow_history().clear()
    library.book_borrow_history("Emma").clear()
    assert library.borrow_history() == [("alice", "Emma")]
    assert library.book_borrow_history("Emma") == ["alice"]