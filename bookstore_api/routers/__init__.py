"""
API Routers Package

Router Structure:
- authors.py: /api/authors/* endpoints
- books.py: /api/books/* endpoints
- users.py: /api/users/* endpoints (register, login, me)

Each router is imported and registered in main.py.
"""

from bookstore_api.routers.authors import router as authors_router
from bookstore_api.routers.books import router as books_router
from bookstore_api.routers.users import router as users_router

__all__ = [
    "authors_router",
    "books_router",
    "users_router",
]
