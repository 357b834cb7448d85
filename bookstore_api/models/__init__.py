"""
SQLAlchemy Models Package

This package contains all database models for the BookStore API.

Model Relationships:
- Author -> Book: One-to-Many (a book has at most one author)

Import all models here to:
1. Make them available as: from bookstore_api.models import Book, Author, User
2. Ensure Alembic discovers them for migrations
"""

from bookstore_api.models.author import Author
from bookstore_api.models.book import Book
from bookstore_api.models.user import User, UserRole

__all__ = [
    "Author",
    "Book",
    "User",
    "UserRole",
]
