"""A scripted walk through the library's operations."""

import sys
from collections.abc import Callable, Sequence

from booklending.errors import LibraryError
from booklending.library import Library


def _attempt(action: Callable[..., object], *args: str) -> None:
    try:
        action(*args)
    except LibraryError as err:
        print(err)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration script and return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    lib = Library()

    print("\n--- Adding Books ---")
    _attempt(lib.add_book, "The Alchemist", "Paulo Coelho", "ISBN001")
    _attempt(lib.add_book, "1984", "George Orwell", "ISBN002")
    _attempt(lib.add_book, "To Kill a Mockingbird", "Harper Lee", "ISBN003")
    _attempt(lib.add_book, "Duplicate Book", "Some Author", "ISBN002")

    print("\n--- Adding Users ---")
    _attempt(lib.add_user, "Alice", "S001", "Student")
    _attempt(lib.add_user, "Bob", "T001", "Teacher")
    _attempt(lib.add_user, "Charlie", "S001", "student")
    _attempt(lib.add_user, "David", "S002", "Librarian")

    print("\n--- Display All Books ---")
    lib.display_all_books()

    print("\n--- Display All Users ---")
    lib.display_all_users()

    print("\n--- Issuing Books ---")
    _attempt(lib.issue_book, "S001", "ISBN001")
    _attempt(lib.issue_book, "T001", "ISBN002")
    _attempt(lib.issue_book, "T001", "ISBN001")
    _attempt(lib.issue_book, "S001", "ISBN999")
    _attempt(lib.issue_book, "X999", "ISBN002")

    print("\n--- Returning Books ---")
    _attempt(lib.return_book, "S001", "ISBN001")
    _attempt(lib.return_book, "S001", "ISBN001")
    _attempt(lib.return_book, "T001", "ISBN003")

    print("\n--- Final Users ---")
    lib.display_all_users()

    print("\n--- Final Books ---")
    lib.display_all_books()
    return 0


if __name__ == "__main__":
    sys.exit(main())