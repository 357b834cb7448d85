"""
Book Repository

Data access for books. Reads eager-load the owning author.
"""

from sqlalchemy.orm import selectinload

from bookstore_api.models import Book
from bookstore_api.repositories.base import BaseRepository


class BookRepository(BaseRepository[Book]):
    """Repository for Book entities."""

    model = Book
    load_options = (selectinload(Book.author),)
