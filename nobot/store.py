"""
Set-like storage for agendas.

Each user key owns one document holding an array that is treated as a set:
members are added with $addToSet and removed with $pull, so duplicates collapse
just like a Redis set. Listing order is whatever MongoDB returns.
"""
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from pymongo.collection import Collection
from pymongo.errors import (
    ConnectionFailure,
    OperationFailure,
    PyMongoError,
    ServerSelectionTimeoutError,
)
from starlette.concurrency import run_in_threadpool

from nobot.logger import logger

T = TypeVar("T")


class StoreError(Exception):
    """A store command failed. `kind` is one of: connection, operation, database."""

    def __init__(self, operation: str, kind: str, cause: Exception):
        super().__init__(f"{operation} failed ({kind}): {cause}")
        self.operation = operation
        self.kind = kind
        self.cause = cause


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    value: T | None = None
    error: StoreError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class MongoSetStore:
    """SADD / SREM / SMEMBERS over a MongoDB collection."""

    def __init__(self, collection: Collection):
        self.collection = collection

    def sadd(self, key: str, member: str) -> bool:
        result = self.collection.update_one(
            {"key": key},
            {"$addToSet": {"members": member}},
            upsert=True,
        )
        # modified_count is 0 when the member was already there
        return bool(result.upserted_id is not None or result.modified_count)

    def srem(self, key: str, member: str) -> bool:
        result = self.collection.update_one({"key": key}, {"$pull": {"members": member}})
        return bool(result.modified_count)

    def smembers(self, key: str) -> list[str]:
        doc = self.collection.find_one({"key": key}, {"members": 1})
        if not doc:
            return []
        return list(doc.get("members") or [])


def _classify(error: PyMongoError) -> str:
    if isinstance(error, (ConnectionFailure, ServerSelectionTimeoutError)):
        return "connection"
    if isinstance(error, OperationFailure):
        return "operation"
    return "database"


async def run_store_call(operation: str, func: Callable[..., T], *args: Any) -> StoreResult[T]:
    """
    Run a blocking store call in the thread pool and wrap the outcome.

    Database errors come back as a failed StoreResult instead of propagating,
    so a broken store never takes the dispatch loop down with it.
    """
    try:
        value = await run_in_threadpool(func, *args)
    except PyMongoError as e:
        logger.exception("MongoDB error in %s: %s", operation, str(e))
        return StoreResult(error=StoreError(operation, _classify(e), e))
    return StoreResult(value=value)
