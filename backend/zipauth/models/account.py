"""
Account model for the accounts collection.
"""
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class Account(BaseModel):
    """
    Account document model for the MongoDB ``users`` collection.

    This is the persisted record and carries the password hash. It is never
    returned to clients directly; see ``AccountResponse``.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    username: str = Field(..., description="Unique username")
    password_hash: str = Field(..., description="Argon2 hashed password")
    token: str = Field(..., description="Per-account session token")
    administrator: bool = Field(default=False, description="Administrator flag")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Account creation timestamp",
    )

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Account":
        """Build an account from a raw MongoDB document."""
        doc = dict(doc)
        doc["_id"] = str(doc["_id"])
        return cls(**doc)

    def to_document(self) -> dict[str, Any]:
        """Serialize for storage, without the ``_id`` key."""
        return self.model_dump(exclude={"id"})
