"""
Tests for the Generic Repository

Exercises the find-all / find-by-id / exists / create / update / delete
contract through the concrete repositories, against the test database.
"""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from bookstore_api.models import Author, Book, User
from bookstore_api.repositories import AuthorRepository, BookRepository, UserRepository


@pytest.fixture
def author_repo(db_session, log) -> AuthorRepository:
    return AuthorRepository(db_session, log)


@pytest.fixture
def book_repo(db_session, log) -> BookRepository:
    return BookRepository(db_session, log)


class TestReads:
    """find_all, find_by_id and exists."""

    def test_find_all_empty(self, author_repo):
        assert author_repo.find_all() == []

    def test_find_all_returns_rows(self, author_repo, sample_author):
        authors = author_repo.find_all()

        assert [a.id for a in authors] == [sample_author.id]

    def test_find_by_id(self, book_repo, sample_book):
        book = book_repo.find_by_id(sample_book.id)

        assert book is not None
        assert book.title == "1984"
        assert book.author.last_name == "Orwell"

    def test_find_by_id_absent_is_none(self, author_repo):
        """Absence is reported as None, not an exception."""
        assert author_repo.find_by_id(424242) is None

    def test_exists(self, author_repo, sample_author):
        assert author_repo.exists(sample_author.id) is True
        assert author_repo.exists(sample_author.id + 1) is False


class TestMutations:
    """create, update and delete return booleans."""

    def test_create_populates_id(self, author_repo):
        author = Author(first_name="Jane", last_name="Doe")

        assert author_repo.create(author) is True
        assert author.id is not None
        assert author_repo.find_by_id(author.id).first_name == "Jane"

    def test_update_existing_row(self, author_repo, sample_author):
        detached = Author(id=sample_author.id, first_name="Eric", last_name="Blair")

        assert author_repo.update(detached) is True

        stored = author_repo.find_by_id(sample_author.id)
        assert stored.first_name == "Eric"
        assert stored.last_name == "Blair"

    def test_update_keeps_unassigned_columns(self, author_repo, sample_author):
        """Attributes not set on the detached entity keep their stored value."""
        detached = Author(id=sample_author.id, first_name="Eric", last_name="Blair")

        author_repo.update(detached)

        assert author_repo.find_by_id(sample_author.id).bio.startswith("English")

    def test_update_missing_row_is_false(self, author_repo):
        detached = Author(id=424242, first_name="No", last_name="Body")

        assert author_repo.update(detached) is False

    def test_delete(self, book_repo, sample_book):
        book = book_repo.find_by_id(sample_book.id)

        assert book_repo.delete(book) is True
        assert book_repo.exists(sample_book.id) is False

    def test_delete_author_detaches_books(self, author_repo, book_repo, sample_book):
        author = author_repo.find_by_id(sample_book.author_id)

        assert author_repo.delete(author) is True

        book = book_repo.find_by_id(sample_book.id)
        assert book.author_id is None


class TestFaults:
    """Storage faults propagate after the session is rolled back."""

    def test_commit_failure_rolls_back_and_raises(self, log):
        session = MagicMock()
        session.commit.side_effect = OperationalError("COMMIT", {}, Exception("db down"))
        repo = AuthorRepository(session, log)

        with pytest.raises(OperationalError):
            repo.create(Author(first_name="Jane", last_name="Doe"))

        session.rollback.assert_called_once()

    def test_update_statement_failure_rolls_back_and_raises(self, log):
        """Constraint faults raised by the UPDATE itself also roll back."""
        session = MagicMock()
        session.execute.side_effect = IntegrityError(
            "UPDATE books", {}, Exception("UNIQUE constraint failed: books.isbn")
        )
        repo = BookRepository(session, log)

        with pytest.raises(IntegrityError):
            repo.update(Book(id=2, title="1984", isbn="9780451524935"))

        session.rollback.assert_called_once()
        session.commit.assert_not_called()


class TestUserRepository:
    """Entity-specific lookups."""

    def test_find_by_email(self, db_session, log, sample_user):
        repo = UserRepository(db_session, log)

        user = repo.find_by_email("Customer@Bookstore.com")

        assert isinstance(user, User)
        assert user.id == sample_user.id

    def test_find_by_email_unknown(self, db_session, log):
        repo = UserRepository(db_session, log)

        assert repo.find_by_email("nobody@example.com") is None
