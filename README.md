# booklending

A small in-memory library lending system. It keeps a catalogue of books and a
register of users. It lends books to users and takes them back, and it applies
each user's borrowing limit.

## Concepts

- **`Book`** (`booklending.book`): a title, an author and an ISBN, plus an
  `available` flag. `describe()` returns the book's details as text, and
  `display_details()` prints them.
- **`User`** (`booklending.users`): a member with a `name`, a `user_id` and a
  list of `borrowed` books. There are two kinds:
  - `Student`: may hold up to 3 books at a time.
  - `Teacher`: may hold up to 5 books at a time.
- **`Library`** (`booklending.library`): holds books in `books` (a dict keyed
  by ISBN) and users in `users` (a dict keyed by user id), both in the order
  they were added. ISBNs and user ids must be unique.

## Usage

```python
from booklending.library import Library
from booklending.errors import BookUnavailableError

lib = Library()
lib.add_book("The Alchemist", "Paulo Coelho", "ISBN001")
lib.add_book("1984", "George Orwell", "ISBN002")

lib.add_user("Alice", "S001", "Student")
lib.add_user("Bob", "T001", "Teacher")

lib.issue_book("S001", "ISBN001")

try:
    lib.issue_book("T001", "ISBN001")
except BookUnavailableError as exc:
    print(exc)          # 'The Alchemist' is not available.

lib.return_book("S001", "ISBN001")

lib.display_all_books()
lib.display_all_users()
```

- `add_book` returns the new `Book`. `add_user` returns the new `User`.
  `issue_book` and `return_book` return the `Book` involved.
- `find_book(isbn)` and `find_user(user_id)` return the entry, or `None`.
- `add_user` checks that the user id is free before it checks the user type.
- `make_user(name, user_id, user_type)` in `booklending.users` builds a
  `Student` or a `Teacher` from the strings `"student"`/`"Student"` or
  `"teacher"`/`"Teacher"`.

Operations also print short messages to standard output, such as
`Book added successfully.`, `User Added Successfully,`,
`'<title>' has been borrowed.` and `'<title>' has been returned.`

### Returning a book someone else holds

If a user returns a book that is on loan to someone else, the book is still
marked available, and then `NotBorrowedError` is raised. The book stays in
the other user's `borrowed` list.

## Errors

Each failed operation raises a subclass of `booklending.errors.LibraryError`:

| Error                   | Raised when                                           |
|-------------------------|-------------------------------------------------------|
| `DuplicateBookError`    | a book with the same ISBN already exists              |
| `DuplicateUserError`    | a user with the same id already exists                |
| `InvalidUserTypeError`  | the user type is neither student nor teacher          |
| `BookNotFoundError`     | no book has the given ISBN                            |
| `UserNotFoundError`     | no user has the given id                              |
| `BookUnavailableError`  | the book is already on loan                           |
| `BorrowLimitError`      | the user already holds their maximum number of books  |
| `NotBorrowedError`      | the book is not on loan, or is not on loan to this user |

The duplicate and invalid-type errors are also `ValueError`s. The not-found
errors are also `LookupError`s. When both the book and the user are unknown,
`BookNotFoundError` is raised.

## Demo

This command runs a fixed, scripted session. The session adds books and users,
issues and returns books, tries several invalid operations (it prints the
error messages), and prints the final state. It takes no options:

```
booklending-demo
```

## What it does not do

All data lives in memory and is lost when the process exits. There is no
storage and no interactive interface. The only command is the scripted demo
above.

## Tests

```
pip install -e ".[test]"
pytest
```