"""
Book Model

The central model of the BookStore API.

A book optionally references the author who wrote it through author_id.
Authorless books are allowed; when an author is removed, its books stay
in the catalogue with author_id set to NULL.
"""

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookstore_api.database import Base

if TYPE_CHECKING:
    from bookstore_api.models.author import Author


class Book(Base):
    """
    Book model representing books in the store.

    Table: books

    Fields:
    - title: Book title (required)
    - year: Publication year
    - isbn: International Standard Book Number (unique, required)
    - summary: Short description of the book
    - image: Cover image file name or URL
    - price: Price with 2 decimal precision

    Relationships:
    - author: Many-to-One (nullable)

    Example:
        book = Book(
            title="1984",
            year=1949,
            isbn="9780451524935",
            author_id=orwell.id,
        )
    """

    __tablename__ = "books"

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    year: Mapped[int | None] = mapped_column(
        Integer,
        nullable=True,
        comment="Year of publication"
    )

    isbn: Mapped[str] = mapped_column(
        String(20),
        unique=True,
        index=True,
        nullable=False,
        comment="International Standard Book Number"
    )

    summary: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Book summary"
    )

    image: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="Cover image file name or URL"
    )

    # Numeric(10, 2) for exact currency values
    price: Mapped[Decimal | None] = mapped_column(
        Numeric(10, 2),
        nullable=True,
        comment="Book price"
    )

    author_id: Mapped[int | None] = mapped_column(
        ForeignKey("authors.id", ondelete="SET NULL"),
        index=True,
        nullable=True,
        comment="Owning author"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    author: Mapped["Author | None"] = relationship(
        "Author",
        back_populates="books",
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', isbn='{self.isbn}')"
