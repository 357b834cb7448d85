"""
Books Router

CRUD endpoints for books. Same pipeline as the authors router, plus a
check that a referenced author exists before a book is written.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Request, Response, status

from bookstore_api.dependencies import AuthorRepo, BookRepo, EntityId, Logger
from bookstore_api.exceptions import EntityNotFoundError, MutationFailedError
from bookstore_api.schemas import BookCreate, BookResponse, BookUpdate
from bookstore_api.services.mapper import (
    book_from_create,
    book_from_update,
    book_to_response,
)

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        500: {"description": "Unexpected server error"},
    },
)


def ensure_author_exists(
    author_id: int | None,
    authors: AuthorRepo,
    log: Logger,
) -> None:
    """Reject a book payload pointing at an author that is not stored."""
    if author_id is not None and not authors.exists(author_id):
        log.warn(f"Book rejected: author with id {author_id} does not exist")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Author with id {author_id} does not exist",
        )


@router.get(
    "",
    response_model=List[BookResponse],
    summary="List all books",
    description="Get every book stored in the database.",
)
def list_books(books: BookRepo, log: Logger) -> List[BookResponse]:
    """List all books."""
    log.info("GetBooks called")
    response = [book_to_response(book) for book in books.find_all()]
    log.info(f"GetBooks returned {len(response)} books")
    return response


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
    responses={404: {"description": "Book not found"}},
)
def get_book(
    book_id: EntityId,
    books: BookRepo,
    log: Logger,
) -> BookResponse:
    """Get a single book by ID, with its author."""
    log.info(f"GetBook called with id: {book_id}")
    book = books.find_by_id(book_id)
    if book is None:
        raise EntityNotFoundError("Book", book_id)

    log.info(f"GetBook with id: {book_id} succeeded")
    return book_to_response(book)


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    responses={400: {"description": "Invalid book data"}},
)
def create_book(
    book_data: BookCreate,
    request: Request,
    response: Response,
    books: BookRepo,
    authors: AuthorRepo,
    log: Logger,
) -> BookResponse:
    """Create a new book."""
    log.info("CreateBook called")
    ensure_author_exists(book_data.author_id, authors, log)

    book = book_from_create(book_data)
    if not books.create(book):
        raise MutationFailedError("Book creation failed")

    response.headers["Location"] = str(request.url_for("get_book", book_id=book.id))
    log.info(f"Book created with id: {book.id}")
    return book_to_response(book)


@router.put(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update a book",
    description="Replace an existing book. The body id must match the path id.",
    responses={
        400: {"description": "Invalid or inconsistent book data"},
        404: {"description": "Book not found"},
    },
)
def update_book(
    book_id: EntityId,
    book_data: BookUpdate,
    books: BookRepo,
    authors: AuthorRepo,
    log: Logger,
) -> None:
    """Update an existing book."""
    log.info(f"UpdateBook called with id: {book_id}")
    if book_id < 1 or book_id != book_data.id:
        log.warn(f"Book update rejected: path id {book_id}, body id {book_data.id}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Path id must be positive and equal to the body id",
        )

    if not books.exists(book_id):
        raise EntityNotFoundError("Book", book_id)

    ensure_author_exists(book_data.author_id, authors, log)

    if not books.update(book_from_update(book_data)):
        raise MutationFailedError(f"Book update failed for id: {book_id}")

    log.warn(f"Book with id: {book_id} updated")


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    responses={
        400: {"description": "Invalid book id"},
        404: {"description": "Book not found"},
    },
)
def delete_book(
    book_id: EntityId,
    books: BookRepo,
    log: Logger,
) -> None:
    """Delete a book."""
    log.info(f"DeleteBook called with id: {book_id}")
    if book_id < 1:
        log.warn(f"Book delete rejected: invalid id {book_id}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Book id must be positive",
        )

    book = books.find_by_id(book_id)
    if book is None:
        raise EntityNotFoundError("Book", book_id)

    if not books.delete(book):
        raise MutationFailedError(f"Book delete failed for id: {book_id}")

    log.warn(f"Book with id: {book_id} deleted")
