"""
Core module - password hashing, session cookies, and account errors.
"""
from zipauth.core.security import (
    hash_password,
    verify_password,
    hash_password_async,
    verify_password_async,
)
from zipauth.core.tokens import (
    new_session_token,
    encode_session_cookie,
    decode_session_cookie,
)

__all__ = [
    "hash_password",
    "verify_password",
    "hash_password_async",
    "verify_password_async",
    "new_session_token",
    "encode_session_cookie",
    "decode_session_cookie",
]
