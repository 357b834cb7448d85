"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

Every repository is built per request from the request's database session
and the process logger handle, so routers never reach for globals.

Usage in routes:
    @router.get("/")
    def list_authors(authors: AuthorRepo, log: Logger): ...
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Path, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from bookstore_api.config import get_settings
from bookstore_api.database import get_db
from bookstore_api.models import User
from bookstore_api.repositories import AuthorRepository, BookRepository, UserRepository
from bookstore_api.schemas.base import MAX_ID
from bookstore_api.services.logger import LoggerService, get_logger_service
from bookstore_api.services.security import decode_access_token

settings = get_settings()

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
DbSession = Annotated[Session, Depends(get_db)]
Logger = Annotated[LoggerService, Depends(get_logger_service)]

# Path ids beyond the storage integer range are rejected as invalid input (400)
EntityId = Annotated[int, Path(le=MAX_ID)]


# =============================================================================
# Repositories
# =============================================================================
def get_author_repository(db: DbSession, logger: Logger) -> AuthorRepository:
    return AuthorRepository(db, logger)


def get_book_repository(db: DbSession, logger: Logger) -> BookRepository:
    return BookRepository(db, logger)


def get_user_repository(db: DbSession, logger: Logger) -> UserRepository:
    return UserRepository(db, logger)


AuthorRepo = Annotated[AuthorRepository, Depends(get_author_repository)]
BookRepo = Annotated[BookRepository, Depends(get_book_repository)]
UserRepo = Annotated[UserRepository, Depends(get_user_repository)]


# =============================================================================
# JWT Authentication
# =============================================================================
# Extracts the token from the "Authorization: Bearer <token>" header and
# adds the "Authorize" button to Swagger UI.
oauth2_scheme = OAuth2PasswordBearer(
    tokenUrl=f"{settings.api_prefix}/users/login",
    auto_error=True,
)


def get_current_user(
    users: UserRepo,
    token: str = Depends(oauth2_scheme),
) -> User:
    """
    Resolve the account behind a Bearer token.

    Raises:
        HTTPException: 401 if the token is invalid or the user is gone
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    payload = decode_access_token(token)
    if payload is None:
        raise credentials_exception

    user_id = payload.get("sub")
    if user_id is None or not str(user_id).isdigit():
        raise credentials_exception

    user = users.find_by_id(int(user_id))
    if user is None:
        raise credentials_exception

    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
