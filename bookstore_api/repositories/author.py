"""
Author Repository

Data access for authors. Reads eager-load each author's books so read
DTOs can list them without extra round-trips.
"""

from sqlalchemy.orm import selectinload

from bookstore_api.models import Author
from bookstore_api.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """Repository for Author entities."""

    model = Author
    load_options = (selectinload(Author.books),)
