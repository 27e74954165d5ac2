from booklending.demo import main


def run(capsys):
    status = main([])
    return status, capsys.readouterr().out


def test_exit_status_zero(capsys):
    status, _ = run(capsys)
    assert status == 0


def test_adding_reports(capsys):
    _, out = run(capsys)
    assert out.count("Book added successfully.") == 3
    assert out.count("A book with this ISBN already exists.") == 1
    assert out.count("User Added Successfully,") == 2
    assert "A user with this ID already exists." in out
    assert "Invalid user type." in out


def test_issuing_reports(capsys):
    _, out = run(capsys)
    assert "'The Alchemist' has been borrowed." in out
    assert "'1984' has been borrowed." in out
    assert "'The Alchemist' is not available." in out
    assert "Book not found" in out
    assert "User not found" in out


def test_returning_reports(capsys):
    _, out = run(capsys)
    assert out.count("'The Alchemist' has been returned.") == 1
    assert out.count("'The Alchemist' is already returned or not yet borrowed") == 1
    assert "'To Kill a Mockingbird' is already returned or not yet borrowed" in out


def test_final_state(capsys):
    _, out = run(capsys)
    final_books = out.split("--- Final Books ---")[1]
    assert final_books.count("Availability: Not Available") == 1
    assert "Title: 1984\nAuthor: George Orwell\nISBN: ISBN002\nAvailability: Not Available" in final_books
    final_users = out.split("--- Final Users ---")[1].split("--- Final Books ---")[0]
    assert "User Name: Alice\nUserId: S001\nBooks Borrowed: 0" in final_users
    assert "User Name: Bob\nUserId: T001\nBooks Borrowed: 1" in final_users