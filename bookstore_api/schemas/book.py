"""
Book Pydantic Schemas

Handles:
- ISBN validation (ISBN-10 or ISBN-13, hyphens stripped)
- Year and price bounds
- Optional owning author reference
"""

import re
from decimal import Decimal

from pydantic import ConfigDict, Field, field_validator

from bookstore_api.schemas.author import AuthorSummary
from bookstore_api.schemas.base import MAX_ID, CamelModel


class BookBase(CamelModel):
    """Base schema with shared book fields."""

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["1984", "Pride and Prejudice"],
    )

    year: int | None = Field(
        default=None,
        ge=1,
        le=9999,
        description="Year of publication",
        examples=[1949],
    )

    isbn: str = Field(
        ...,
        max_length=20,
        description="ISBN-10 or ISBN-13",
        examples=["978-0451524935", "0-06-112008-1"],
    )

    summary: str | None = Field(
        default=None,
        max_length=5000,
        description="Book summary",
        examples=["A dystopian novel set in a totalitarian society..."],
    )

    image: str | None = Field(
        default=None,
        max_length=500,
        description="Cover image file name or URL",
        examples=["1984-cover.png"],
    )

    price: Decimal | None = Field(
        default=None,
        ge=0,
        le=Decimal("9999.99"),
        description="Book price",
        examples=["12.99"],
    )

    author_id: int | None = Field(
        default=None,
        ge=1,
        le=MAX_ID,
        description="Identifier of the book's author",
        examples=[1],
    )

    @field_validator("isbn")
    @classmethod
    def validate_isbn(cls, v: str) -> str:
        """
        Validate ISBN format.

        Accepts:
        - ISBN-10: 9 digits followed by a digit or X
        - ISBN-13: 13 digits

        Hyphens and spaces are stripped for storage.
        """
        cleaned = re.sub(r"[-\s]", "", v)

        if len(cleaned) == 10:
            if not re.match(r"^\d{9}[\dX]$", cleaned):
                raise ValueError(
                    "Invalid ISBN-10 format. Must be 10 characters: "
                    "9 digits followed by a digit or 'X'"
                )
        elif len(cleaned) == 13:
            if not cleaned.isdigit():
                raise ValueError("Invalid ISBN-13 format. Must be exactly 13 digits")
        else:
            raise ValueError(
                "ISBN must be either 10 or 13 characters (excluding hyphens)"
            )

        return cleaned

    @field_validator("title")
    @classmethod
    def title_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize title."""
        if not v.strip():
            raise ValueError("Title cannot be empty or whitespace")
        return v.strip()


class BookCreate(BookBase):
    """Schema for creating a new book."""
    pass


class BookUpdate(BookBase):
    """
    Schema for replacing an existing book.

    The id must equal the {book_id} path parameter.
    """

    id: int = Field(
        ...,
        le=MAX_ID,
        description="Identifier of the book being updated",
        examples=[1],
    )


class BookResponse(BookBase):
    """Schema for book responses, with the author embedded."""

    id: int = Field(..., description="Unique identifier")

    author: AuthorSummary | None = Field(
        default=None,
        description="The book's author, if any",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "1984",
                "year": 1949,
                "isbn": "9780451524935",
                "summary": "A dystopian novel about totalitarianism",
                "image": "1984-cover.png",
                "price": "12.99",
                "authorId": 1,
                "author": {"id": 1, "firstName": "George", "lastName": "Orwell"},
            }
        },
    )
