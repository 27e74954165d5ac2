"""Exceptions raised by library operations."""


class LibraryError(Exception):
    """Base class for every failure reported by the library."""


class DuplicateBookError(LibraryError, ValueError):
    """A book with the same ISBN is already in the catalogue."""

    def __init__(self, isbn: str) -> None:
        super().__init__("A book with this ISBN already exists.")
        self.isbn = isbn


class DuplicateUserError(LibraryError, ValueError):
    """A user with the same ID is already registered."""

    def __init__(self, user_id: str) -> None:
        super().__init__("A user with this ID already exists.")
        self.user_id = user_id


class InvalidUserTypeError(LibraryError, ValueError):
    """The requested kind of user is not known."""

    def __init__(self, user_type: str) -> None:
        super().__init__("Invalid user type.")
        self.user_type = user_type


class BookNotFoundError(LibraryError, LookupError):
    """No book carries the requested ISBN."""

    def __init__(self, isbn: str) -> None:
        super().__init__("Book not found")
        self.isbn = isbn


class UserNotFoundError(LibraryError, LookupError):
    """No user carries the requested ID."""

    def __init__(self, user_id: str) -> None:
        super().__init__("User not found")
        self.user_id = user_id


class BookUnavailableError(LibraryError):
    """The book is already on loan."""

    def __init__(self, title: str) -> None:
        super().__init__(f"'{title}' is not available.")
        self.title = title


class BorrowLimitError(LibraryError):
    """The user already holds as many books as allowed."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"You have already borrowed {limit} books.")
        self.limit = limit


class NotBorrowedError(LibraryError):
    """The book cannot be returned by this user."""

    def __init__(self, title: str, message: str) -> None:
        super().__init__(message)
        self.title = title

    @classmethod
    def already_returned(cls, title: str) -> "NotBorrowedError":
        return cls(title, f"'{title}' is already returned or not yet borrowed")

    @classmethod
    def not_yours(cls, title: str) -> "NotBorrowedError":
        return cls(title, f"'{title}' is not borrowed by you.")