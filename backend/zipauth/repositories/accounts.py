"""
Account repository: lookup, creation and persistence of accounts.

The workflow layer only depends on ``AccountRepository``. The MongoDB
implementation is the authority on username uniqueness through a unique
index; concurrent writes to the same account are last-writer-wins.
"""
import logging
from abc import ABC, abstractmethod
from typing import Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from zipauth.core.errors import DuplicateUsername
from zipauth.models.account import Account

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"


class AccountRepository(ABC):
    """Keyed store of accounts."""

    @abstractmethod
    async def find_by_id(self, account_id: str) -> Optional[Account]:
        ...

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[Account]:
        ...

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Persist a new account and return it with its assigned id.

        Raises:
            DuplicateUsername: If the username is already taken
        """

    @abstractmethod
    async def save(self, account: Account) -> Account:
        """Persist the mutable fields of an existing account.

        Raises:
            DuplicateUsername: If the new username belongs to another account
        """


class MongoAccountRepository(AccountRepository):
    """Account repository backed by a MongoDB collection."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the accounts database."""
        self.db = db
        self.users_collection = db[USERS_COLLECTION]

    async def ensure_indexes(self) -> None:
        """Create the unique username index."""
        await self.users_collection.create_index("username", unique=True)

    async def has_unique_username_index(self) -> bool:
        """Check that usernames are enforced unique by the store."""
        info = await self.users_collection.index_information()
        return any(
            index.get("unique") and list(index["key"]) == [("username", 1)]
            for index in info.values()
        )

    async def find_by_id(self, account_id: str) -> Optional[Account]:
        """
        Get account by ID.

        Args:
            account_id: Account ObjectId as string

        Returns:
            Account or None if not found or the id is not an ObjectId
        """
        if not account_id or not ObjectId.is_valid(account_id):
            return None

        doc = await self.users_collection.find_one({"_id": ObjectId(account_id)})
        if not doc:
            return None
        return Account.from_document(doc)

    async def find_by_username(self, username: str) -> Optional[Account]:
        """
        Get account by username.

        Args:
            username: Exact username

        Returns:
            Account or None if not found
        """
        doc = await self.users_collection.find_one({"username": username})
        if not doc:
            return None
        return Account.from_document(doc)

    async def create(self, account: Account) -> Account:
        try:
            result = await self.users_collection.insert_one(account.to_document())
        except DuplicateKeyError as e:
            raise DuplicateUsername(f'User "{account.username}" exists already.') from e

        logger.info(f"Created account {result.inserted_id} ({account.username})")
        return account.model_copy(update={"id": str(result.inserted_id)})

    async def save(self, account: Account) -> Account:
        try:
            await self.users_collection.replace_one(
                {"_id": ObjectId(account.id)},
                account.to_document(),
            )
        except DuplicateKeyError as e:
            raise DuplicateUsername(f'User "{account.username}" exists already.') from e
        return account
