"""
Account request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from zipauth.models.account import Account


class Credentials(BaseModel):
    """Username and password body shared by login and profile edits.

    Both fields are optional so that absent, null or empty values reach the
    service and fail as ``MissingField`` instead of a generic validation error.
    """
    username: Optional[str] = Field(default=None, description="Account username")
    password: Optional[str] = Field(default=None, description="Plain text password")


class LoginRequest(Credentials):
    """Login request body."""


class EditAccountRequest(Credentials):
    """Profile edit request body (new username and new password)."""


class CreateAccountRequest(Credentials):
    """Account creation request body."""
    administrator: bool = Field(default=False, description="Create as administrator")


class AccountResponse(BaseModel):
    """Account information response (excludes the password hash)."""
    id: str = Field(..., description="Account ID")
    username: str = Field(..., description="Account username")
    token: str = Field(..., description="Per-account session token")
    administrator: bool = Field(..., description="Administrator flag")
    created_at: datetime = Field(..., description="Account creation timestamp")

    @classmethod
    def from_account(cls, account: Account) -> "AccountResponse":
        """Project a stored account to its public view."""
        return cls(
            id=account.id,
            username=account.username,
            token=account.token,
            administrator=account.administrator,
            created_at=account.created_at,
        )


class LoginStatusResponse(BaseModel):
    """Whether the caller holds a session cookie."""
    user: bool


class LogoutResponse(BaseModel):
    """Result of clearing the session cookie."""
    model_config = ConfigDict(populate_by_name=True)

    clear_store: bool = Field(..., alias="clearStore")


class ResetTokenResponse(BaseModel):
    """Result of rotating the session token."""
    updated: bool = True


class LoginResult(BaseModel):
    """Successful login: the account view plus the cookie value to set."""
    account: AccountResponse
    cookie: str
