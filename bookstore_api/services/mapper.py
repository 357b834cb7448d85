"""
DTO Mapper

Explicit field-by-field conversions between ORM entities and the
request/response schemas.

Rules:
- Create DTO -> entity: identifier left unset, the database assigns it
- Update DTO -> entity: identifier copied so the repository can target the row
- Entity -> Response DTO: every exposed field copied; timestamps and
  password hashes are not part of any response

Every function is pure: it builds a new object and never touches a session.
"""

from bookstore_api.models import Author, Book, User
from bookstore_api.schemas import (
    AuthorBookSummary,
    AuthorCreate,
    AuthorResponse,
    AuthorSummary,
    AuthorUpdate,
    BookCreate,
    BookResponse,
    BookUpdate,
    UserResponse,
)


# =============================================================================
# Authors
# =============================================================================
def author_from_create(dto: AuthorCreate) -> Author:
    return Author(
        first_name=dto.first_name,
        last_name=dto.last_name,
        bio=dto.bio,
    )


def author_from_update(dto: AuthorUpdate) -> Author:
    return Author(
        id=dto.id,
        first_name=dto.first_name,
        last_name=dto.last_name,
        bio=dto.bio,
    )


def author_to_response(author: Author) -> AuthorResponse:
    return AuthorResponse(
        id=author.id,
        first_name=author.first_name,
        last_name=author.last_name,
        bio=author.bio,
        books=[
            AuthorBookSummary(
                id=book.id,
                title=book.title,
                year=book.year,
                isbn=book.isbn,
            )
            for book in author.books
        ],
    )


# =============================================================================
# Books
# =============================================================================
def book_from_create(dto: BookCreate) -> Book:
    return Book(
        title=dto.title,
        year=dto.year,
        isbn=dto.isbn,
        summary=dto.summary,
        image=dto.image,
        price=dto.price,
        author_id=dto.author_id,
    )


def book_from_update(dto: BookUpdate) -> Book:
    return Book(
        id=dto.id,
        title=dto.title,
        year=dto.year,
        isbn=dto.isbn,
        summary=dto.summary,
        image=dto.image,
        price=dto.price,
        author_id=dto.author_id,
    )


def book_to_response(book: Book) -> BookResponse:
    author = None
    if book.author is not None:
        author = AuthorSummary(
            id=book.author.id,
            first_name=book.author.first_name,
            last_name=book.author.last_name,
        )

    return BookResponse(
        id=book.id,
        title=book.title,
        year=book.year,
        isbn=book.isbn,
        summary=book.summary,
        image=book.image,
        price=book.price,
        author_id=book.author_id,
        author=author,
    )


# =============================================================================
# Users
# =============================================================================
def user_to_response(user: User) -> UserResponse:
    """Project an account to its public shape; the password hash is dropped."""
    return UserResponse(
        id=user.id,
        email=user.email,
        role=user.role,
        created_at=user.created_at,
    )
