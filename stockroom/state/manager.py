"""Key-value blob stores backing inventory persistence."""

from abc import ABC, abstractmethod

import redis

from stockroom.config import Settings, get_settings
from stockroom.utils.logging import get_logger

logger = get_logger(__name__)


class StorageError(Exception):
    """Raised when the underlying storage cannot be read or written."""


class BlobStore(ABC):
    """String blobs addressed by fixed keys."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the blob stored under key, or None if absent."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store a blob under key, replacing any previous value."""

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove key if present."""


class InMemoryBlobStore(BlobStore):
    """Process-local blob store, used for tests and throwaway sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value

    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class RedisBlobStore(BlobStore):
    """Blob storage using Redis."""

    def __init__(
        self,
        redis_url: str,
        key_prefix: str = "",
        client: redis.Redis | None = None,
    ) -> None:
        self.redis_url = redis_url
        self.key_prefix = key_prefix
        self.redis_client = client

    def connect(self) -> None:
        """Establish Redis connection."""
        if self.redis_client is None:
            self.redis_client = redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
            logger.info("redis_connected", url=self.redis_url)

    def disconnect(self) -> None:
        """Close Redis connection."""
        if self.redis_client:
            self.redis_client.close()
            self.redis_client = None
            logger.info("redis_disconnected")

    def _key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    def get(self, key: str) -> str | None:
        """Get a blob from Redis."""
        try:
            if not self.redis_client:
                self.connect()
            value = self.redis_client.get(self._key(key))
        except (redis.RedisError, ValueError) as e:
            raise StorageError(f"Failed to read {key}: {e}") from e

        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        """Set a blob in Redis."""
        try:
            if not self.redis_client:
                self.connect()
            self.redis_client.set(self._key(key), value)
        except (redis.RedisError, ValueError) as e:
            raise StorageError(f"Failed to write {key}: {e}") from e

        logger.debug("state_set", key=self._key(key), size=len(value))

    def delete(self, key: str) -> None:
        """Delete a key from Redis."""
        try:
            if not self.redis_client:
                self.connect()
            self.redis_client.delete(self._key(key))
        except (redis.RedisError, ValueError) as e:
            raise StorageError(f"Failed to delete {key}: {e}") from e

        logger.debug("state_deleted", key=self._key(key))


def create_blob_store(settings: Settings | None = None) -> BlobStore:
    """Build the blob store selected by configuration."""
    settings = settings or get_settings()

    if settings.storage_backend == "memory":
        return InMemoryBlobStore()

    return RedisBlobStore(settings.redis_url, key_prefix=settings.storage_key_prefix)
