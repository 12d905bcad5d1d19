import asyncio
import json

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from app import dependencies
from app.database import create_tables
from app.main import close_store
from app.schemas.artist import Artist
from app.services.artist_repository import ArtistRepository, FavoritesRepository
from app.services.storage_service import (
    DatabaseStore,
    JsonFileStore,
    MemoryStore,
    RedisStore,
    StorageError,
)


def _artist(artist_id, name="Test Artist", **fields):
    return Artist(
        id=artist_id,
        name=name,
        bio="A performer used in storage tests",
        category=["Singer"],
        languages=["English"],
        fee_range="₹5,000 - ₹15,000",
        location="Jaipur, Rajasthan",
        **fields,
    )


class FakeRedis:
    def __init__(self, fail=False):
        self.data = {}
        self.fail = fail

    async def get(self, key):
        if self.fail:
            raise ConnectionError("redis is down")
        return self.data.get(key)

    async def set(self, key, value):
        if self.fail:
            raise ConnectionError("redis is down")
        self.data[key] = value


def test_repository_round_trip_in_memory():
    repository = ArtistRepository(MemoryStore())

    async def run():
        await repository.save([_artist("1", rating=0), _artist("2", name="Second")])
        return await repository.load()

    loaded = asyncio.run(run())
    assert [a.id for a in loaded] == ["1", "2"]
    assert loaded[0].fee_range == "₹5,000 - ₹15,000"


def test_nothing_stored_loads_as_empty():
    assert asyncio.run(ArtistRepository(MemoryStore()).load()) == []


def test_json_file_store_writes_camel_case_documents(tmp_path):
    repository = ArtistRepository(JsonFileStore(tmp_path))
    asyncio.run(repository.save([_artist("1", profile_image="/img/1.png")]))

    stored = json.loads((tmp_path / "submittedArtists.json").read_text(encoding="utf-8"))
    assert stored[0]["feeRange"] == "₹5,000 - ₹15,000"
    assert stored[0]["profileImage"] == "/img/1.png"
    assert [a.id for a in asyncio.run(repository.load())] == ["1"]


@pytest.mark.parametrize("content", ["{not json", "", '{"id": "1"}', "42"])
def test_unreadable_file_loads_as_empty(tmp_path, content):
    (tmp_path / "submittedArtists.json").write_text(content, encoding="utf-8")
    assert asyncio.run(ArtistRepository(JsonFileStore(tmp_path)).load()) == []


def test_malformed_records_are_skipped(tmp_path):
    documents = [
        {"id": "1", "name": "Good"},
        {"name": "Missing id"},
        {"id": "3", "name": "Bad rating", "rating": 9},
        "not a record",
    ]
    (tmp_path / "submittedArtists.json").write_text(json.dumps(documents), encoding="utf-8")

    loaded = asyncio.run(ArtistRepository(JsonFileStore(tmp_path)).load())

    assert [a.id for a in loaded] == ["1"]


def test_json_file_store_raises_when_it_cannot_write(tmp_path):
    blocker = tmp_path / "blocked"
    blocker.write_text("a file, not a directory")
    store = JsonFileStore(blocker)

    with pytest.raises(StorageError):
        asyncio.run(store.write("submittedArtists", []))


def test_update_keeps_id_and_remove_reports_missing():
    repository = ArtistRepository(MemoryStore())

    async def run():
        await repository.add(_artist("1", rating=0))
        updated = await repository.update("1", id="changed", rating=4.5, experience="Verified")
        missing = await repository.update("nope", rating=1)
        removed = await repository.remove("1")
        removed_again = await repository.remove("1")
        return updated, missing, removed, removed_again, await repository.load()

    updated, missing, removed, removed_again, remaining = asyncio.run(run())
    assert updated.id == "1"
    assert updated.rating == 4.5
    assert updated.experience == "Verified"
    assert missing is None
    assert removed is True
    assert removed_again is False
    assert remaining == []


def test_favorites_toggle():
    favorites = FavoritesRepository(MemoryStore())

    async def run():
        states = [await favorites.toggle("1"), await favorites.toggle("2"), await favorites.toggle("1")]
        return states, await favorites.load()

    states, stored = asyncio.run(run())
    assert states == [True, True, False]
    assert stored == ["2"]


def test_redis_store_round_trip():
    client = FakeRedis()
    store = RedisStore(client, prefix="test:")

    asyncio.run(store.write("favoriteArtists", ["1", "2"]))

    assert json.loads(client.data["test:favoriteArtists"]) == ["1", "2"]
    assert asyncio.run(store.read("favoriteArtists")) == ["1", "2"]


def test_redis_failures():
    store = RedisStore(FakeRedis(fail=True))

    assert asyncio.run(store.read("submittedArtists")) is None
    with pytest.raises(StorageError):
        asyncio.run(store.write("submittedArtists", []))


def test_database_store_overwrites_whole_collection(tmp_path):
    async def run():
        engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}")
        try:
            await create_tables(engine)
            repository = ArtistRepository(DatabaseStore(async_sessionmaker(engine, expire_on_commit=False)))

            empty = await repository.load()
            await repository.save([_artist("1"), _artist("2")])
            await repository.save([_artist("3")])
            return empty, await repository.load()
        finally:
            await engine.dispose()

    empty, loaded = asyncio.run(run())
    assert empty == []
    assert [a.id for a in loaded] == ["3"]


class ClosableStore(MemoryStore):
    closed = False

    async def close(self):
        self.closed = True


def test_shutdown_closes_the_shared_store(monkeypatch):
    closable = ClosableStore()
    monkeypatch.setattr(dependencies, "build_store", lambda settings: closable)
    dependencies.get_store.cache_clear()

    asyncio.run(close_store())

    assert closable.closed
    assert dependencies.get_store.cache_info().currsize == 0


def test_shutdown_skips_stores_without_close(monkeypatch):
    monkeypatch.setattr(dependencies, "build_store", lambda settings: MemoryStore())
    dependencies.get_store.cache_clear()

    asyncio.run(close_store())

    assert dependencies.get_store.cache_info().currsize == 0
