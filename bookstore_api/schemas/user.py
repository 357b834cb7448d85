"""
User Pydantic Schemas

- UserCredentials: register/login body (email address and password)
- UserResponse: public account data (never exposes the password hash)
- TokenResponse: login result carrying the signed access token
"""

from datetime import datetime

from pydantic import EmailStr, Field

from bookstore_api.schemas.base import CamelModel


class UserCredentials(CamelModel):
    """
    Schema for registration and login.

    bcrypt only uses the first 72 bytes of a password, so longer
    passwords are rejected up front.
    """

    email_address: EmailStr = Field(
        ...,
        description="Email address used as login name",
        examples=["customer@bookstore.com"],
    )

    password: str = Field(
        ...,
        min_length=6,
        max_length=72,
        description="Account password",
        examples=["P@ssword1"],
    )


class UserResponse(CamelModel):
    """Schema for user responses."""

    id: int = Field(..., description="Unique user identifier")
    email: EmailStr = Field(..., description="Login email address")
    role: str = Field(..., description="Account role", examples=["Customer"])
    created_at: datetime = Field(..., description="When the user registered")


class TokenResponse(CamelModel):
    """Schema returned by a successful login."""

    token: str = Field(..., description="Signed JWT access token")
    token_type: str = Field(default="bearer", description="Token scheme")
    expires_in: int = Field(..., description="Token lifetime in seconds")
