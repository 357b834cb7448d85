"""
Author Pydantic Schemas

These schemas define the shape of data for Author-related API operations.

- AuthorCreate: POST body, no identifier
- AuthorUpdate: PUT body, identifier required and checked against the path
- AuthorResponse: read shape, identifier plus the author's books
"""

from pydantic import ConfigDict, Field, field_validator

from bookstore_api.schemas.base import MAX_ID, CamelModel


class AuthorBase(CamelModel):
    """
    Base schema with shared author fields.

    Validation rules live here so create, update and response agree.
    """

    first_name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Author's first name",
        examples=["George", "Jane"],
    )

    last_name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Author's last name",
        examples=["Orwell", "Austen"],
    )

    bio: str | None = Field(
        default=None,
        max_length=5000,
        description="Author biography",
        examples=["English novelist and essayist, journalist and critic."],
    )

    @field_validator("first_name", "last_name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """Reject whitespace-only names and strip surrounding blanks."""
        if not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip()


class AuthorCreate(AuthorBase):
    """Schema for creating a new author."""
    pass


class AuthorUpdate(AuthorBase):
    """
    Schema for replacing an existing author.

    PUT semantics: every field is sent again. The id must equal the
    {author_id} path parameter, otherwise the request is rejected with 400.
    """

    id: int = Field(
        ...,
        le=MAX_ID,
        description="Identifier of the author being updated",
        examples=[1],
    )


class AuthorBookSummary(CamelModel):
    """A book as listed under its author."""

    id: int
    title: str
    year: int | None = None
    isbn: str


class AuthorSummary(CamelModel):
    """An author as embedded in a book response."""

    id: int
    first_name: str
    last_name: str


class AuthorResponse(AuthorBase):
    """
    Schema for author responses (what the API returns).

    Built from ORM entities by the mapper service.
    """

    id: int = Field(
        ...,
        description="Unique identifier",
        examples=[1, 42],
    )

    books: list[AuthorBookSummary] = Field(
        default_factory=list,
        description="Books written by this author",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "firstName": "George",
                "lastName": "Orwell",
                "bio": "English novelist and essayist.",
                "books": [
                    {"id": 1, "title": "1984", "year": 1949, "isbn": "9780451524935"}
                ],
            }
        },
    )
