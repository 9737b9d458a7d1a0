"""
zipline-auth - FastAPI Application

Account management and cookie-based session authentication.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from zipauth.config import get_settings
from zipauth.core.errors import AccountError
from zipauth.database.connections import close_connections, get_database
from zipauth.repositories.accounts import MongoAccountRepository
from zipauth.routers import accounts, health

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s | %(levelname)s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("zipauth")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Startup:
    - Warn when the default cookie signing key is in use
    - Connect to MongoDB
    - Create the unique username index

    Shutdown:
    - Close the database connection
    """
    logger.info("Starting up zipline-auth...")

    if get_settings().uses_default_cookie_secret:
        logger.warning(
            "COOKIE_SECRET_KEY is not set: session cookies are signed with the "
            "public default key and can be forged"
        )

    try:
        repository = MongoAccountRepository(await get_database())
        await repository.ensure_indexes()
        logger.info("Account indexes created")
    except Exception as e:
        logger.warning(f"Database initialization warning: {e}")

    yield

    logger.info("Shutting down zipline-auth...")
    await close_connections()
    logger.info("Database connections closed")


app = FastAPI(
    title="zipline-auth API",
    description="""
## Accounts and sessions

- **Accounts**: create accounts, edit username and password
- **Sessions**: log in to receive a session cookie, log out to clear it
- **Tokens**: rotate the per-account session token

Protected endpoints read the session cookie set by `POST /api/user/login`.
    """,
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(AccountError)
async def account_error_handler(request: Request, exc: AccountError):
    """Render account errors with their own status code."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "error": exc.kind},
    )


app.include_router(health.router)
app.include_router(accounts.router)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": "zipline-auth API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
