"""The catalogue of books and the register of users."""

from booklending.book import Book
from booklending.errors import (
    BookNotFoundError,
    DuplicateBookError,
    DuplicateUserError,
    UserNotFoundError,
)
from booklending.users import User, make_user


class Library:
    """Holds books by ISBN and users by ID, in the order they were added."""

    def __init__(self) -> None:
        self.books: dict[str, Book] = {}
        self.users: dict[str, User] = {}

    def add_book(self, title: str, author: str, isbn: str) -> Book:
        """Add a book; raise DuplicateBookError if the ISBN is taken."""
        if isbn in self.books:
            raise DuplicateBookError(isbn)
        book = Book(title, author, isbn)
        self.books[isbn] = book
        print("Book added successfully.")
        return book

    def add_user(self, name: str, user_id: str, user_type: str) -> User:
        """Register a user; the ID is checked before the type."""
        if user_id in self.users:
            raise DuplicateUserError(user_id)
        user = make_user(name, user_id, user_type)
        self.users[user_id] = user
        print("User Added Successfully,")
        return user

    def find_book(self, isbn: str) -> Book | None:
        """Return the book with this ISBN, or None."""
        return self.books.get(isbn)

    def find_user(self, user_id: str) -> User | None:
        """Return the user with this ID, or None."""
        return self.users.get(user_id)

    def _lookup(self, user_id: str, isbn: str) -> tuple[User, Book]:
        book = self.find_book(isbn)
        user = self.find_user(user_id)
        if book is None:
            raise BookNotFoundError(isbn)
        if user is None:
            raise UserNotFoundError(user_id)
        return user, book

    def issue_book(self, user_id: str, isbn: str) -> Book:
        """Lend the book to the user and return it."""
        user, book = self._lookup(user_id, isbn)
        user.borrow_book(book)
        return book

    def return_book(self, user_id: str, isbn: str) -> Book:
        """Take the book back from the user and return it."""
        user, book = self._lookup(user_id, isbn)
        user.return_book(book)
        return book

    def display_all_books(self) -> None:
        """Print every book, numbered from 1."""
        for number, book in enumerate(self.books.values(), start=1):
            print(f"Book {number}:")
            book.display_details()

    def display_all_users(self) -> None:
        """Print every user, numbered from 1."""
        for number, user in enumerate(self.users.values(), start=1):
            print(f"User{number}:")
            user.display_user_info()