"""A single book in the catalogue."""

from dataclasses import dataclass


@dataclass(eq=False)
class Book:
    """A book identified by its ISBN; compared by identity."""

    title: str
    author: str
    isbn: str
    available: bool = True

    def borrow(self) -> bool:
        """Mark the book as on loan; return whether its state changed."""
        if not self.available:
            return False
        self.available = False
        print(f"'{self.title}' has been borrowed.")
        return True

    def give_back(self) -> bool:
        """Mark the book as available; return whether its state changed."""
        if self.available:
            return False
        self.available = True
        print(f"'{self.title}' has been returned.")
        return True

    def describe(self) -> str:
        """Return the multi-line details shown for this book."""
        status = "Available" if self.available else "Not Available"
        return (
            f"Title: {self.title}\n"
            f"Author: {self.author}\n"
            f"ISBN: {self.isbn}\n"
            f"Availability: {status}"
        )

    def display_details(self) -> None:
        """Print the book's details."""
        print(self.describe())