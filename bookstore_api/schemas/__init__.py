"""
Pydantic Schemas Package

Request/response DTOs, kept separate from the SQLAlchemy entities so the
API controls exactly which fields are accepted or exposed per operation.

Schema Naming Convention:
- XxxCreate: Fields accepted when creating a record (no identifier)
- XxxUpdate: Fields accepted when replacing a record (identifier required)
- XxxResponse: Fields returned in API responses
"""

from bookstore_api.schemas.author import (
    AuthorBase,
    AuthorBookSummary,
    AuthorCreate,
    AuthorResponse,
    AuthorSummary,
    AuthorUpdate,
)
from bookstore_api.schemas.book import (
    BookBase,
    BookCreate,
    BookResponse,
    BookUpdate,
)
from bookstore_api.schemas.user import (
    TokenResponse,
    UserCredentials,
    UserResponse,
)

__all__ = [
    # Author schemas
    "AuthorBase",
    "AuthorCreate",
    "AuthorUpdate",
    "AuthorResponse",
    "AuthorSummary",
    "AuthorBookSummary",
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    # User schemas
    "UserCredentials",
    "UserResponse",
    "TokenResponse",
]
