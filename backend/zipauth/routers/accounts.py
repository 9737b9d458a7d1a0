"""
Account router for login, logout, profile edits, token reset and creation.
"""
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status

from zipauth.config import Settings, get_settings
from zipauth.dependencies.accounts import AccountServiceDep, SessionCookie
from zipauth.schemas.account import (
    AccountResponse,
    CreateAccountRequest,
    EditAccountRequest,
    LoginRequest,
    LoginStatusResponse,
    LogoutResponse,
    ResetTokenResponse,
)

router = APIRouter(prefix="/api/user", tags=["Accounts"])


@router.get(
    "/login-status",
    response_model=LoginStatusResponse,
    summary="Check for a session cookie",
)
async def login_status(cookie: SessionCookie, service: AccountServiceDep):
    """Report whether the caller holds a session cookie. Never fails."""
    return await service.login_status(cookie)


@router.get(
    "/",
    response_model=AccountResponse,
    summary="Get the logged-in account",
)
async def current_user(cookie: SessionCookie, service: AccountServiceDep):
    return await service.current_user(cookie)


@router.patch(
    "/",
    response_model=AccountResponse,
    summary="Change username and password",
)
async def edit_user(
    body: EditAccountRequest,
    cookie: SessionCookie,
    service: AccountServiceDep,
):
    """
    Overwrite the logged-in account's username and password.

    - **username**: New username
    - **password**: New password
    """
    return await service.edit_profile(cookie, body)


@router.post(
    "/login",
    response_model=AccountResponse,
    summary="Login and receive a session cookie",
)
async def login(
    body: LoginRequest,
    response: Response,
    cookie: SessionCookie,
    service: AccountServiceDep,
    settings: Annotated[Settings, Depends(get_settings)],
):
    """
    Authenticate with username and password.

    On success the session cookie is set on the response.
    """
    result = await service.login(cookie, body)
    response.set_cookie(
        key=settings.cookie_name,
        value=result.cookie,
        path=settings.cookie_path,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )
    return result.account


@router.post(
    "/logout",
    response_model=LogoutResponse,
    summary="Clear the session cookie",
)
async def logout(
    response: Response,
    cookie: SessionCookie,
    service: AccountServiceDep,
    settings: Annotated[Settings, Depends(get_settings)],
):
    def clear() -> None:
        response.delete_cookie(key=settings.cookie_name, path=settings.cookie_path)

    return await service.logout(cookie, clear)


@router.post(
    "/reset-token",
    response_model=ResetTokenResponse,
    summary="Rotate the account session token",
)
async def reset_token(cookie: SessionCookie, service: AccountServiceDep):
    """
    Generate a new session token for the logged-in account.

    The current session cookie stays valid.
    """
    return await service.reset_token(cookie)


@router.post(
    "/create",
    response_model=AccountResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create an account",
)
async def create(
    body: CreateAccountRequest,
    cookie: SessionCookie,
    service: AccountServiceDep,
):
    """
    Create a new account.

    - **username**: Must be unique
    - **password**: Plain text password, stored hashed
    - **administrator**: Optional, defaults to false
    """
    return await service.create_account(cookie, body)
