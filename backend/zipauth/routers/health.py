"""
Health check router for liveness and readiness probes.
"""
from fastapi import APIRouter, status

from zipauth.database.connections import get_database, get_mongo_client
from zipauth.repositories.accounts import MongoAccountRepository

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    status_code=status.HTTP_200_OK,
    summary="Basic health check",
)
async def health_check():
    """Returns 200 if the API is running."""
    return {"status": "healthy"}


@router.get(
    "/health/ready",
    status_code=status.HTTP_200_OK,
    summary="Readiness check with dependencies",
)
async def readiness_check():
    """
    Readiness check for the account store.

    - **mongodb**: the server answers a ping
    - **username_index**: the unique username index exists, without it
      duplicate accounts could be created
    """
    checks = {
        "mongodb": "unknown",
        "username_index": "unknown",
    }

    try:
        client = await get_mongo_client()
        await client.admin.command("ping")
        checks["mongodb"] = "healthy"
    except Exception as e:
        checks["mongodb"] = f"unhealthy: {e}"

    if checks["mongodb"] == "healthy":
        try:
            repository = MongoAccountRepository(await get_database())
            if await repository.has_unique_username_index():
                checks["username_index"] = "healthy"
            else:
                checks["username_index"] = "missing"
        except Exception as e:
            checks["username_index"] = f"unhealthy: {e}"

    ready = all(v == "healthy" for v in checks.values())

    return {
        "status": "healthy" if ready else "degraded",
        "checks": checks,
    }
