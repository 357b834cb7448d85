"""
User Model

Represents an account that can log in to the BookStore API.

Users are only touched by the identity endpoints (register, login, me);
the Author/Book CRUD pipeline never reads or writes them.
"""

from datetime import datetime
from enum import Enum

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from bookstore_api.database import Base


class UserRole(str, Enum):
    """
    Roles assigned to accounts.

    - ADMINISTRATOR: Store staff, seeded by scripts/seed_data.py
    - CUSTOMER: Default role for self-registered accounts
    """
    ADMINISTRATOR = "Administrator"
    CUSTOMER = "Customer"


class User(Base):
    """
    User model.

    Table: users

    Example:
        user = User(
            email="admin@bookstore.com",
            hashed_password=hash_password("P@ssword1"),
            role=UserRole.ADMINISTRATOR.value,
        )
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="Email address, used as the login name"
    )

    hashed_password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    role: Mapped[str] = mapped_column(
        String(20),
        default=UserRole.CUSTOMER.value,
        nullable=False,
        comment="Account role (Administrator, Customer)"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="When the user registered"
    )

    def __repr__(self) -> str:
        return f"User(id={self.id}, email='{self.email}', role='{self.role}')"
