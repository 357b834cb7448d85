"""
User Repository

Data access for accounts, used by the identity endpoints only.
"""

from sqlalchemy import select

from bookstore_api.models import User
from bookstore_api.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entities."""

    model = User

    def find_by_email(self, email: str) -> User | None:
        """Look up an account by its login email (case-insensitive)."""
        stmt = select(User).where(User.email == email.lower())
        return self.session.execute(stmt).scalar_one_or_none()
