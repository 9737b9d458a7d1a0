"""
Session token generation and session cookie encoding.

Two independent secrets exist per login:

- the account's session token, a random string stored on the account and
  rotated by ``/reset-token``;
- the session cookie, held by the client, which embeds the account id.

The cookie is a signed JWT (``sub`` = account id), so a client cannot mint a
cookie for an arbitrary id. It does not embed the session token, so rotating
the token leaves existing cookies valid.
"""
import secrets
from datetime import datetime, timezone

from bson import ObjectId
from jose import JWTError, jwt

from zipauth.config import Settings, get_settings
from zipauth.core.errors import MalformedCookie


def new_session_token(nbytes: int | None = None) -> str:
    """
    Generate a fresh, URL-safe session token.

    Args:
        nbytes: Bytes of randomness (defaults to ``session_token_bytes``)

    Returns:
        Random token string
    """
    if nbytes is None:
        nbytes = get_settings().session_token_bytes
    return secrets.token_urlsafe(nbytes)


def encode_session_cookie(account_id: str, settings: Settings | None = None) -> str:
    """
    Create the session cookie value for an account.

    Args:
        account_id: Account ObjectId as string
        settings: Settings holding the signing key (defaults to ``get_settings()``)

    Returns:
        Signed cookie value
    """
    if settings is None:
        settings = get_settings()
    payload = {
        "sub": str(account_id),
        "iat": datetime.now(timezone.utc),
    }
    return jwt.encode(
        payload,
        settings.cookie_secret_key,
        algorithm=settings.cookie_algorithm,
    )


def decode_session_cookie(value: str, settings: Settings | None = None) -> str:
    """
    Recover the account id embedded in a session cookie.

    Args:
        value: Cookie value as sent by the client
        settings: Settings holding the signing key (defaults to ``get_settings()``)

    Returns:
        Account ObjectId as string

    Raises:
        MalformedCookie: If the value is not a validly signed cookie or does
            not carry a well-formed account id
    """
    if not value:
        raise MalformedCookie()

    if settings is None:
        settings = get_settings()
    try:
        payload = jwt.decode(
            value,
            settings.cookie_secret_key,
            algorithms=[settings.cookie_algorithm],
        )
    except JWTError as e:
        raise MalformedCookie(f"Malformed session cookie: {e}") from e

    account_id = payload.get("sub")
    if not isinstance(account_id, str) or not ObjectId.is_valid(account_id):
        raise MalformedCookie("Session cookie does not carry an account id.")
    return account_id
