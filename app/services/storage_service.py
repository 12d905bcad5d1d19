"""
Document stores backing the local persistence adapter.

Each store keeps whole JSON documents under a key ("submittedArtists",
"favoriteArtists"). Reads never fail: missing or unreadable content is
reported as None and logged. Writes overwrite the full document and raise
StorageError when the backend refuses them.
"""
import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Protocol

import redis.asyncio as redis
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.config import Settings
from app.database import AsyncSessionLocal
from app.models.artist import StoredCollection

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """A document could not be written."""


class DocumentStore(Protocol):
    async def read(self, key: str) -> Any | None:
        ...

    async def write(self, key: str, value: Any) -> None:
        ...


def _decode(raw: str | bytes | None, source: str) -> Any | None:
    if raw is None or raw == "":
        return None
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"[Storage] Ignoring unreadable content in {source}: {e}")
        return None


def _encode(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


class MemoryStore:
    """Process-local store. Holds encoded documents so reads return fresh copies."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._documents: dict[str, str] = dict(initial or {})

    async def read(self, key: str) -> Any | None:
        return _decode(self._documents.get(key), f"memory:{key}")

    async def write(self, key: str, value: Any) -> None:
        self._documents[key] = _encode(value)


class JsonFileStore:
    """One `<key>.json` file per document under a base directory."""

    def __init__(self, base_path: str | Path):
        self.base_path = Path(base_path)

    def _path(self, key: str) -> Path:
        return self.base_path / f"{key}.json"

    async def read(self, key: str) -> Any | None:
        path = self._path(key)
        try:
            raw = await asyncio.to_thread(path.read_text, encoding="utf-8")
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.warning(f"[Storage] Could not read {path}: {e}")
            return None
        return _decode(raw, str(path))

    async def write(self, key: str, value: Any) -> None:
        path = self._path(key)
        await asyncio.to_thread(self._write_file, path, _encode(value))

    @staticmethod
    def _write_file(path: Path, content: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path = path.with_suffix(".json.tmp")
            tmp_path.write_text(content, encoding="utf-8")
            tmp_path.replace(path)
        except OSError as e:
            raise StorageError(f"Could not write {path}: {e}") from e


class RedisStore:
    """Documents stored as JSON strings in Redis (no expiry)."""

    def __init__(self, client: redis.Redis, prefix: str = "artistly:"):
        self._client = client
        self.prefix = prefix

    @classmethod
    def from_url(cls, url: str, prefix: str = "artistly:") -> "RedisStore":
        client = redis.from_url(url, encoding="utf-8", decode_responses=True)
        return cls(client, prefix=prefix)

    async def read(self, key: str) -> Any | None:
        try:
            raw = await self._client.get(f"{self.prefix}{key}")
        except Exception as e:
            # If Redis fails, behave as if nothing was stored
            logger.warning(f"[Storage] Redis read failed for {key}: {type(e).__name__}: {e}")
            return None
        return _decode(raw, f"redis:{self.prefix}{key}")

    async def write(self, key: str, value: Any) -> None:
        try:
            await self._client.set(f"{self.prefix}{key}", _encode(value))
        except Exception as e:
            raise StorageError(f"Redis write failed for {key}: {e}") from e

    async def close(self) -> None:
        await self._client.aclose()


class DatabaseStore:
    """Documents stored as rows of the stored_collections table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def read(self, key: str) -> Any | None:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(StoredCollection.value).where(StoredCollection.key == key)
                )
                raw = result.scalar_one_or_none()
        except Exception as e:
            logger.warning(f"[Storage] Database read failed for {key}: {type(e).__name__}: {e}")
            return None
        return _decode(raw, f"database:{key}")

    async def write(self, key: str, value: Any) -> None:
        try:
            async with self._session_factory() as session:
                await session.merge(StoredCollection(key=key, value=_encode(value)))
                await session.commit()
        except Exception as e:
            raise StorageError(f"Database write failed for {key}: {e}") from e


def build_store(settings: Settings) -> DocumentStore:
    """Create the store selected by `settings.storage_backend`."""
    if settings.storage_backend == "memory":
        return MemoryStore()
    if settings.storage_backend == "redis":
        return RedisStore.from_url(settings.redis_url)
    if settings.storage_backend == "database":
        return DatabaseStore(AsyncSessionLocal)
    return JsonFileStore(settings.storage_path)
