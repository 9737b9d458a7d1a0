"""
Security utilities for password hashing and verification.
"""
from passlib.context import CryptContext
from fastapi.concurrency import run_in_threadpool

# Password hashing context using argon2 (salted, memory-hard)
pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(plain_password: str) -> str:
    """
    Hash a plain password using argon2.

    Every call draws a fresh salt, so hashing the same password twice yields
    two different strings that both verify.

    Args:
        plain_password: The plain text password to hash

    Returns:
        Hashed password string in PHC format (``$argon2id$...``)
    """
    return pwd_context.hash(plain_password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    The derived digest is compared in constant time. A stored value that is
    empty or not a recognised hash never verifies.

    Args:
        plain_password: The plain text password to verify
        hashed_password: The hashed password to compare against

    Returns:
        True if password matches, False otherwise
    """
    if not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


def needs_rehash(hashed_password: str) -> bool:
    """Check whether a stored hash was made with outdated parameters."""
    return pwd_context.needs_update(hashed_password)


async def hash_password_async(plain_password: str) -> str:
    """Hash a password in the threadpool so the event loop stays free."""
    return await run_in_threadpool(hash_password, plain_password)


async def verify_password_async(plain_password: str, hashed_password: str) -> bool:
    """Verify a password in the threadpool so the event loop stays free."""
    return await run_in_threadpool(verify_password, plain_password, hashed_password)
