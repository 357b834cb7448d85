"""
Tests for the DTO Mapper

Conversions must keep every field except the identifier on the way in,
and every exposed field on the way out.
"""

from datetime import datetime, timezone
from decimal import Decimal

from bookstore_api.models import Author, Book, User
from bookstore_api.schemas import AuthorCreate, AuthorUpdate, BookCreate, BookUpdate
from bookstore_api.services.mapper import (
    author_from_create,
    author_from_update,
    author_to_response,
    book_from_create,
    book_from_update,
    book_to_response,
    user_to_response,
)


class TestAuthorMapping:

    def test_create_dto_leaves_id_unset(self):
        dto = AuthorCreate(first_name="Jane", last_name="Doe", bio="Writer")

        author = author_from_create(dto)

        assert author.id is None
        assert (author.first_name, author.last_name, author.bio) == ("Jane", "Doe", "Writer")

    def test_update_dto_carries_id(self):
        dto = AuthorUpdate(id=7, first_name="Jane", last_name="Doe")

        author = author_from_update(dto)

        assert author.id == 7
        assert author.bio is None

    def test_round_trip_preserves_fields(self):
        dto = AuthorCreate(first_name="Jane", last_name="Doe", bio="Writer")
        author = author_from_create(dto)
        author.id = 3

        response = author_to_response(author)

        assert response.id == 3
        assert response.model_dump(include={"first_name", "last_name", "bio"}) == dto.model_dump()
        assert response.books == []

    def test_response_lists_books(self):
        author = Author(id=1, first_name="George", last_name="Orwell")
        author.books = [Book(id=2, title="1984", year=1949, isbn="9780451524935")]

        response = author_to_response(author)

        assert response.books[0].title == "1984"
        assert response.model_dump(by_alias=True)["books"][0]["isbn"] == "9780451524935"


class TestBookMapping:

    def test_round_trip_preserves_fields(self):
        dto = BookCreate(
            title="1984",
            year=1949,
            isbn="978-0451524935",
            summary="Dystopia",
            image="cover.png",
            price=Decimal("12.99"),
            author_id=4,
        )
        book = book_from_create(dto)
        assert book.id is None
        book.id = 9

        response = book_to_response(book)

        assert response.id == 9
        assert response.model_dump(exclude={"id", "author"}) == dto.model_dump()
        # author_id is kept even when the relationship is not loaded
        assert response.author_id == 4
        assert response.author is None

    def test_update_dto_carries_id(self):
        dto = BookUpdate(id=5, title="1984", isbn="9780451524935")

        book = book_from_update(dto)

        assert book.id == 5
        assert book.author_id is None

    def test_response_embeds_author(self):
        author = Author(id=1, first_name="George", last_name="Orwell")
        book = Book(id=2, title="1984", isbn="9780451524935", author_id=1, author=author)

        response = book_to_response(book)

        assert response.author.first_name == "George"
        assert response.model_dump(by_alias=True)["author"]["lastName"] == "Orwell"


class TestUserMapping:

    def test_password_hash_is_dropped(self):
        user = User(
            id=1,
            email="customer@bookstore.com",
            hashed_password="$2b$12$secret",
            role="Customer",
            created_at=datetime(2024, 1, 15, tzinfo=timezone.utc),
        )

        data = user_to_response(user).model_dump(by_alias=True)

        assert data["email"] == "customer@bookstore.com"
        assert "hashedPassword" not in data
        assert "$2b$12$secret" not in str(data)
