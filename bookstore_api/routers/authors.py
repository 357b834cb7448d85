"""
Authors Router

CRUD endpoints for authors.

Every handler follows the same pipeline:
1. Log the call with its key parameters
2. Validate (Pydantic validates bodies before the handler runs; the
   handler checks path/payload consistency)
3. Check existence for single-entity operations (404 when absent)
4. Map DTO -> entity and call the repository
5. Repository returned False -> MutationFailedError (500)
6. Map entity -> DTO and return the success status

Anything unexpected propagates to the application's exception handlers.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Request, Response, status

from bookstore_api.dependencies import AuthorRepo, EntityId, Logger
from bookstore_api.exceptions import EntityNotFoundError, MutationFailedError
from bookstore_api.schemas import AuthorCreate, AuthorResponse, AuthorUpdate
from bookstore_api.services.mapper import (
    author_from_create,
    author_from_update,
    author_to_response,
)

router = APIRouter(
    prefix="/authors",
    tags=["Authors"],
    responses={
        500: {"description": "Unexpected server error"},
    },
)


@router.get(
    "",
    response_model=List[AuthorResponse],
    summary="List all authors",
    description="Get every author stored in the database.",
)
def list_authors(authors: AuthorRepo, log: Logger) -> List[AuthorResponse]:
    """List all authors. An empty store yields an empty list."""
    log.info("GetAuthors called")
    response = [author_to_response(author) for author in authors.find_all()]
    log.info(f"GetAuthors returned {len(response)} authors")
    return response


@router.get(
    "/{author_id}",
    response_model=AuthorResponse,
    summary="Get an author by ID",
    description="Retrieve a specific author and the books they wrote.",
    responses={404: {"description": "Author not found"}},
)
def get_author(
    author_id: EntityId,
    authors: AuthorRepo,
    log: Logger,
) -> AuthorResponse:
    """Get a single author by ID."""
    log.info(f"GetAuthor called with id: {author_id}")
    author = authors.find_by_id(author_id)
    if author is None:
        raise EntityNotFoundError("Author", author_id)

    log.info(f"GetAuthor with id: {author_id} succeeded")
    return author_to_response(author)


@router.post(
    "",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new author",
    description="Create a new author. The Location header points at the new resource.",
    responses={400: {"description": "Invalid author data"}},
)
def create_author(
    author_data: AuthorCreate,
    request: Request,
    response: Response,
    authors: AuthorRepo,
    log: Logger,
) -> AuthorResponse:
    """Create a new author."""
    log.info("CreateAuthor called")
    author = author_from_create(author_data)
    if not authors.create(author):
        raise MutationFailedError("Author creation failed")

    response.headers["Location"] = str(
        request.url_for("get_author", author_id=author.id)
    )
    log.info(f"Author created with id: {author.id}")
    return author_to_response(author)


@router.put(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update an author",
    description="Replace an existing author. The body id must match the path id.",
    responses={
        400: {"description": "Invalid or inconsistent author data"},
        404: {"description": "Author not found"},
    },
)
def update_author(
    author_id: EntityId,
    author_data: AuthorUpdate,
    authors: AuthorRepo,
    log: Logger,
) -> None:
    """Update an existing author."""
    log.info(f"UpdateAuthor called with id: {author_id}")
    if author_id < 1 or author_id != author_data.id:
        log.warn(f"Author update rejected: path id {author_id}, body id {author_data.id}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Path id must be positive and equal to the body id",
        )

    if not authors.exists(author_id):
        raise EntityNotFoundError("Author", author_id)

    if not authors.update(author_from_update(author_data)):
        raise MutationFailedError(f"Author update failed for id: {author_id}")

    log.warn(f"Author with id: {author_id} updated")


@router.delete(
    "/{author_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an author",
    description="Delete an author. Their books remain, without an author.",
    responses={
        400: {"description": "Invalid author id"},
        404: {"description": "Author not found"},
    },
)
def delete_author(
    author_id: EntityId,
    authors: AuthorRepo,
    log: Logger,
) -> None:
    """Delete an author."""
    log.info(f"DeleteAuthor called with id: {author_id}")
    if author_id < 1:
        log.warn(f"Author delete rejected: invalid id {author_id}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Author id must be positive",
        )

    author = authors.find_by_id(author_id)
    if author is None:
        raise EntityNotFoundError("Author", author_id)

    if not authors.delete(author):
        raise MutationFailedError(f"Author delete failed for id: {author_id}")

    log.warn(f"Author with id: {author_id} deleted")
