"""
Repositories over a DocumentStore.

Each repository reads and writes its whole collection at once: every
mutation is load, modify, save. Two concurrent writers race and the last
save wins.
"""
import logging

from pydantic import ValidationError

from app.schemas.artist import Artist
from app.services.storage_service import DocumentStore

logger = logging.getLogger(__name__)

SUBMITTED_ARTISTS_KEY = "submittedArtists"
FAVORITE_ARTISTS_KEY = "favoriteArtists"


class ArtistRepository:
    """Artists submitted through onboarding."""

    def __init__(self, store: DocumentStore, key: str = SUBMITTED_ARTISTS_KEY):
        self.store = store
        self.key = key

    async def load(self) -> list[Artist]:
        """
        Load every stored artist.

        Returns an empty list when nothing is stored or the stored content
        isn't a list. Individual records that don't parse are skipped.
        """
        data = await self.store.read(self.key)
        if data is None:
            return []
        if not isinstance(data, list):
            logger.warning(f"[ArtistRepository] Expected a list under {self.key}, got {type(data).__name__}")
            return []

        artists = []
        for index, raw in enumerate(data):
            try:
                artists.append(Artist.model_validate(raw))
            except ValidationError as e:
                logger.warning(
                    f"[ArtistRepository] Skipping unreadable record #{index} under {self.key}: "
                    f"{e.error_count()} error(s)"
                )
        return artists

    async def save(self, artists: list[Artist]) -> None:
        """Overwrite the stored collection."""
        await self.store.write(
            self.key,
            [artist.model_dump(mode="json", by_alias=True, exclude_none=True) for artist in artists],
        )

    async def get(self, artist_id: str) -> Artist | None:
        for artist in await self.load():
            if artist.id == artist_id:
                return artist
        return None

    async def add(self, artist: Artist) -> Artist:
        artists = await self.load()
        artists.append(artist)
        await self.save(artists)
        return artist

    async def update(self, artist_id: str, **changes) -> Artist | None:
        """Apply `changes` to one artist. Returns None if it doesn't exist."""
        artists = await self.load()
        updated = None
        for index, artist in enumerate(artists):
            if artist.id == artist_id:
                # id is immutable
                changes.pop("id", None)
                updated = artist.model_copy(update=changes)
                artists[index] = updated
                break
        if updated is None:
            return None
        await self.save(artists)
        return updated

    async def remove(self, artist_id: str) -> bool:
        artists = await self.load()
        remaining = [artist for artist in artists if artist.id != artist_id]
        if len(remaining) == len(artists):
            return False
        await self.save(remaining)
        return True


class FavoritesRepository:
    """Ids of artists the visitor marked as favorite."""

    def __init__(self, store: DocumentStore, key: str = FAVORITE_ARTISTS_KEY):
        self.store = store
        self.key = key

    async def load(self) -> list[str]:
        data = await self.store.read(self.key)
        if not isinstance(data, list):
            return []
        return [str(item) for item in data if isinstance(item, (str, int))]

    async def save(self, favorites: list[str]) -> None:
        await self.store.write(self.key, favorites)

    async def is_favorite(self, artist_id: str) -> bool:
        return artist_id in await self.load()

    async def add(self, artist_id: str) -> list[str]:
        favorites = await self.load()
        if artist_id not in favorites:
            favorites.append(artist_id)
            await self.save(favorites)
        return favorites

    async def remove(self, artist_id: str) -> list[str]:
        favorites = await self.load()
        if artist_id in favorites:
            favorites = [f for f in favorites if f != artist_id]
            await self.save(favorites)
        return favorites

    async def toggle(self, artist_id: str) -> bool:
        """Flip the favorite flag; returns the new state."""
        if await self.is_favorite(artist_id):
            await self.remove(artist_id)
            return False
        await self.add(artist_id)
        return True
