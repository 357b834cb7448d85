"""
Repositories Package

Each repository wraps a SQLAlchemy session and exposes the generic
find-all / find-by-id / exists / create / update / delete contract from
BaseRepository, plus any entity-specific lookups.

Repositories are built per request by the dependencies in
bookstore_api.dependencies, receiving the request's session and the
process logger handle.
"""

from bookstore_api.repositories.author import AuthorRepository
from bookstore_api.repositories.base import BaseRepository
from bookstore_api.repositories.book import BookRepository
from bookstore_api.repositories.user import UserRepository

__all__ = [
    "BaseRepository",
    "AuthorRepository",
    "BookRepository",
    "UserRepository",
]
