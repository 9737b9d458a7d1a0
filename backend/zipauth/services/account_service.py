"""
Account service: login, logout, profile edits, token reset and account creation.
"""
import logging
from typing import Callable, Optional

from zipauth.config import Settings
from zipauth.core.errors import (
    AccountError,
    AccountNotFound,
    AlreadyAuthenticated,
    CreationFailed,
    DuplicateUsername,
    InvalidCredentials,
    MissingField,
    NotAdministrator,
    NotAuthenticated,
)
from zipauth.core.security import (
    hash_password_async,
    needs_rehash,
    verify_password_async,
)
from zipauth.core.tokens import (
    decode_session_cookie,
    encode_session_cookie,
    new_session_token,
)
from zipauth.models.account import Account
from zipauth.repositories.accounts import AccountRepository
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

logger = logging.getLogger(__name__)


def _require_fields(username: Optional[str], password: Optional[str]) -> None:
    if not username:
        raise MissingField("Missing username.")
    if not password:
        raise MissingField("Missing password.")


class AccountService:
    """Service for account and session operations.

    Every operation receives the caller's session cookie value (``None`` when
    absent). Presence of the cookie is what marks a caller as logged in;
    it is only decoded when an operation needs the account behind it.
    """

    def __init__(self, repository: AccountRepository, settings: Settings):
        """Initialize with an account repository and settings."""
        self.repository = repository
        self.settings = settings

    async def _account_from_cookie(self, cookie: Optional[str]) -> Account:
        """
        Resolve the account behind a session cookie.

        Raises:
            NotAuthenticated: If no cookie is present
            MalformedCookie: If the cookie cannot be decoded
            AccountNotFound: If the decoded id has no account
        """
        if not cookie:
            raise NotAuthenticated()

        account_id = decode_session_cookie(cookie, self.settings)
        account = await self.repository.find_by_id(account_id)
        if account is None:
            raise AccountNotFound("User doesn't exist.")
        return account

    async def login_status(self, cookie: Optional[str]) -> LoginStatusResponse:
        """Report whether the caller holds a session cookie."""
        return LoginStatusResponse(user=bool(cookie))

    async def current_user(self, cookie: Optional[str]) -> AccountResponse:
        """Return the logged-in account."""
        account = await self._account_from_cookie(cookie)
        return AccountResponse.from_account(account)

    async def edit_profile(
        self,
        cookie: Optional[str],
        request: EditAccountRequest,
    ) -> AccountResponse:
        """
        Overwrite the logged-in account's username and password.

        The new username is not pre-checked against other accounts; if it is
        taken, the repository rejects the save with ``DuplicateUsername``.

        Args:
            cookie: Session cookie value
            request: New username and new password

        Returns:
            Updated account view
        """
        account = await self._account_from_cookie(cookie)
        _require_fields(request.username, request.password)

        account.username = request.username
        account.password_hash = await hash_password_async(request.password)
        account = await self.repository.save(account)

        logger.info(f"Updated profile of account {account.id}")
        return AccountResponse.from_account(account)

    async def login(
        self,
        cookie: Optional[str],
        request: LoginRequest,
    ) -> LoginResult:
        """
        Authenticate with username and password.

        Args:
            cookie: Session cookie value (must be absent)
            request: Login request with username and password

        Returns:
            LoginResult with the account view and the cookie value to set

        Raises:
            AlreadyAuthenticated: If a session cookie is already present
            MissingField: If username or password is empty
            AccountNotFound: If the username is unknown
            InvalidCredentials: If the password is wrong
        """
        if cookie:
            raise AlreadyAuthenticated()
        _require_fields(request.username, request.password)

        account = await self.repository.find_by_username(request.username)
        if account is None:
            logger.info(f"Login failed for unknown user {request.username!r}")
            raise AccountNotFound(f'User "{request.username}" was not found.')

        if not await verify_password_async(request.password, account.password_hash):
            logger.info(f"Login failed for account {account.id}: wrong password")
            raise InvalidCredentials()

        if needs_rehash(account.password_hash):
            account.password_hash = await hash_password_async(request.password)
            account = await self.repository.save(account)
            logger.info(f"Rehashed password of account {account.id}")

        logger.info(f"Account {account.id} logged in")
        return LoginResult(
            account=AccountResponse.from_account(account),
            cookie=encode_session_cookie(account.id, self.settings),
        )

    async def logout(
        self,
        cookie: Optional[str],
        clear: Callable[[], None],
    ) -> LogoutResponse:
        """
        Clear the session cookie.

        Clearing is best effort: a failing ``clear`` is reported through
        ``clear_store=False`` rather than raised.

        Args:
            cookie: Session cookie value
            clear: Callback that removes the cookie from the response

        Raises:
            NotAuthenticated: If no session cookie is present
        """
        if not cookie:
            raise NotAuthenticated()

        try:
            clear()
        except Exception as e:
            logger.warning(f"Could not clear session cookie: {e}")
            return LogoutResponse(clear_store=False)
        return LogoutResponse(clear_store=True)

    async def reset_token(self, cookie: Optional[str]) -> ResetTokenResponse:
        """
        Rotate the logged-in account's session token.

        The session cookie is independent of the token, so the current
        cookie keeps working after a reset.
        """
        account = await self._account_from_cookie(cookie)

        account.token = new_session_token(self.settings.session_token_bytes)
        await self.repository.save(account)

        logger.info(f"Reset session token of account {account.id}")
        return ResetTokenResponse(updated=True)

    async def create_account(
        self,
        cookie: Optional[str],
        request: CreateAccountRequest,
    ) -> AccountResponse:
        """
        Create a new account.

        Open to anonymous callers unless ``require_admin_for_create`` is set,
        in which case the caller must be logged in as an administrator.

        Args:
            cookie: Session cookie value
            request: Username, password and administrator flag

        Returns:
            Created account view

        Raises:
            MissingField: If username or password is empty
            DuplicateUsername: If the username is taken
            CreationFailed: If the repository fails for any other reason
        """
        if self.settings.require_admin_for_create:
            caller = await self._account_from_cookie(cookie)
            if not caller.administrator:
                raise NotAdministrator()

        _require_fields(request.username, request.password)

        existing = await self.repository.find_by_username(request.username)
        if existing is not None:
            raise DuplicateUsername()

        account = Account(
            username=request.username,
            password_hash=await hash_password_async(request.password),
            token=new_session_token(self.settings.session_token_bytes),
            administrator=request.administrator,
        )

        try:
            account = await self.repository.create(account)
        except AccountError:
            raise
        except Exception as e:
            logger.error(f"Could not create account {request.username!r}: {e}")
            raise CreationFailed(f"Could not create user: {e}") from e

        return AccountResponse.from_account(account)
