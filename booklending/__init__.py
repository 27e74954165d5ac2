"""In-memory library lending: books, students, teachers and borrowing limits."""

__version__ = "0.1.0"
__all__ = ["book", "demo", "errors", "library", "users"]