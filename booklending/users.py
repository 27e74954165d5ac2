"""Library members and their borrowing rules."""

from booklending.book import Book
from booklending.errors import (
    BookUnavailableError,
    BorrowLimitError,
    InvalidUserTypeError,
    NotBorrowedError,
)


class User:
    """A library member who may hold up to ``max_books`` books."""

    max_books = 0

    def __init__(self, name: str, user_id: str) -> None:
        self.name = name
        self.user_id = user_id
        self.borrowed: list[Book] = []

    def borrow_book(self, book: Book) -> None:
        """Take a book on loan, raising if it is out or the limit is reached."""
        if not book.available:
            raise BookUnavailableError(book.title)
        if len(self.borrowed) >= self.max_books:
            raise BorrowLimitError(self.max_books)
        book.borrow()
        self.borrowed.append(book)

    def return_book(self, book: Book) -> None:
        """Give a book back.

        A book that is on loan is marked available even when this user
        does not hold it; NotBorrowedError is raised in that case.
        """
        if book.available:
            raise NotBorrowedError.already_returned(book.title)
        book.give_back()
        if not any(held is book for held in self.borrowed):
            raise NotBorrowedError.not_yours(book.title)
        self.borrowed.remove(book)

    def describe(self) -> str:
        """Return the multi-line information shown for this user."""
        lines = [
            f"User Name: {self.name}",
            f"UserId: {self.user_id}",
            f"Books Borrowed: {len(self.borrowed)}",
        ]
        for number, book in enumerate(self.borrowed, start=1):
            lines.append(f"Book {number}")
            lines.append(book.describe())
        return "\n".join(lines)

    def display_user_info(self) -> None:
        """Print the user's information."""
        print(self.describe())


class Student(User):
    """A student may hold three books at once."""

    max_books = 3


class Teacher(User):
    """A teacher may hold five books at once."""

    max_books = 5


_USER_TYPES: dict[str, type[User]] = {
    "student": Student,
    "Student": Student,
    "teacher": Teacher,
    "Teacher": Teacher,
}


def make_user(name: str, user_id: str, user_type: str) -> User:
    """Create a user of the named type ("student"/"Student", "teacher"/"Teacher")."""
    try:
        cls = _USER_TYPES[user_type]
    except KeyError:
        raise InvalidUserTypeError(user_type) from None
    return cls(name, user_id)