"""
Request/response schemas.
"""
from zipauth.schemas.account import (
    AccountResponse,
    CreateAccountRequest,
    EditAccountRequest,
    LoginRequest,
    LoginResult,
    LoginStatusResponse,
    LogoutResponse,
    ResetTokenResponse,
)

__all__ = [
    "AccountResponse",
    "CreateAccountRequest",
    "EditAccountRequest",
    "LoginRequest",
    "LoginResult",
    "LoginStatusResponse",
    "LogoutResponse",
    "ResetTokenResponse",
]
