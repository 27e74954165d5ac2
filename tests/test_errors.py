import pytest

from booklending.book import Book
from booklending.errors import (
    BookNotFoundError,
    BookUnavailableError,
    BorrowLimitError,
    DuplicateBookError,
    DuplicateUserError,
    InvalidUserTypeError,
    LibraryError,
    NotBorrowedError,
    UserNotFoundError,
)
from booklending.library import Library
from booklending.users import Student


def test_duplicate_book_message_and_isbn():
    err = DuplicateBookError("ISBN002")
    assert str(err) == "A book with this ISBN already exists."
    assert err.isbn == "ISBN002"


def test_duplicate_user_message():
    err = DuplicateUserError("S001")
    assert str(err) == "A user with this ID already exists."
    assert err.user_id == "S001"


def test_invalid_user_type_message():
    assert str(InvalidUserTypeError("Librarian")) == "Invalid user type."


def test_not_found_messages():
    assert str(BookNotFoundError("ISBN999")) == "Book not found"
    assert str(UserNotFoundError("X999")) == "User not found"


def test_unavailable_and_limit_messages():
    assert str(BookUnavailableError("1984")) == "'1984' is not available."
    assert str(BorrowLimitError(3)) == "You have already borrowed 3 books."


def test_not_borrowed_messages():
    assert str(NotBorrowedError.already_returned("1984")) == (
        "'1984' is already returned or not yet borrowed"
    )
    assert str(NotBorrowedError.not_yours("1984")) == "'1984' is not borrowed by you."


def test_library_failures_share_base_class():
    lib = Library()
    with pytest.raises(LibraryError):
        lib.issue_book("X999", "ISBN999")
    with pytest.raises(LookupError):
        lib.return_book("X999", "ISBN999")


def test_user_failures_share_base_class():
    student = Student("Alice", "S001")
    with pytest.raises(LibraryError):
        student.return_book(Book("1984", "George Orwell", "ISBN002"))