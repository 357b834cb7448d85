"""
Users Router

Identity endpoints:
- POST /users/register - Create an account (Customer role)
- POST /users/login    - Exchange credentials for a JWT access token
- GET  /users/me       - Current account, from the Bearer token

Security:
=========
- Passwords are hashed with bcrypt before storage
- Plain text passwords are never logged or stored
- Login failures return the same message for unknown email and wrong password
"""

from fastapi import APIRouter, HTTPException, status

from bookstore_api.config import get_settings
from bookstore_api.dependencies import CurrentUser, Logger, UserRepo
from bookstore_api.exceptions import MutationFailedError
from bookstore_api.models import User, UserRole
from bookstore_api.schemas import TokenResponse, UserCredentials, UserResponse
from bookstore_api.services.mapper import user_to_response
from bookstore_api.services.security import (
    create_access_token,
    hash_password,
    verify_password,
)

settings = get_settings()

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={
        500: {"description": "Unexpected server error"},
    },
)


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={409: {"description": "Email already registered"}},
)
def register(
    credentials: UserCredentials,
    users: UserRepo,
    log: Logger,
) -> UserResponse:
    """Register a new Customer account."""
    email = credentials.email_address.lower()
    log.info(f"Register called for: {email}")

    if users.find_by_email(email) is not None:
        log.warn(f"Registration rejected: {email} already registered")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        )

    user = User(
        email=email,
        hashed_password=hash_password(credentials.password),
        role=UserRole.CUSTOMER.value,
    )
    if not users.create(user):
        raise MutationFailedError(f"User registration failed for: {email}")

    log.info(f"User registered: {email}")
    return user_to_response(user)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Login with email and password",
    description="""
    Authenticate with email address and password to receive a JWT.

    Include the token in the Authorization header:
    ```
    Authorization: Bearer <token>
    ```
    """,
    responses={401: {"description": "Incorrect email or password"}},
)
def login(
    credentials: UserCredentials,
    users: UserRepo,
    log: Logger,
) -> TokenResponse:
    """Authenticate a user and issue an access token."""
    email = credentials.email_address.lower()
    log.info(f"Login attempt for: {email}")

    user = users.find_by_email(email)
    if user is None or not verify_password(credentials.password, user.hashed_password):
        log.warn(f"Login failed for: {email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = create_access_token(
        {"sub": str(user.id), "email": user.email, "role": user.role}
    )

    log.info(f"User logged in: {email}")
    return TokenResponse(
        token=token,
        token_type="bearer",
        expires_in=settings.access_token_expire_minutes * 60,
    )


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get current user",
    responses={401: {"description": "Not authenticated"}},
)
def get_me(current_user: CurrentUser) -> UserResponse:
    """Return the account behind the Bearer token."""
    return user_to_response(current_user)
