"""
Manager dashboard over submitted artists.

Approving an artist gives it a fixed rating and marks it verified; an
artist with no rating (or rating 0) is still pending review.
"""
import logging
import random
from typing import Literal

from app.core.exceptions import NotFoundException, ServiceUnavailableException
from app.schemas.artist import Artist
from app.schemas.dashboard import DashboardStats
from app.services.artist_repository import ArtistRepository
from app.services.storage_service import StorageError
from app.utils.sorting import name_key, fee_floor

logger = logging.getLogger(__name__)

APPROVED_RATING = 4.5
APPROVED_EXPERIENCE = "Verified"

TableSortField = Literal["name", "location", "fee"]
SortOrder = Literal["asc", "desc"]

_TABLE_SORT_KEYS = {
    "name": name_key,
    "location": lambda a: a.location.casefold(),
    "fee": lambda a: fee_floor(a.fee_range),
}


def compute_stats(artists: list[Artist]) -> DashboardStats:
    return DashboardStats(
        total_artists=len(artists),
        pending_review=sum(1 for a in artists if not a.is_approved),
        approved=sum(1 for a in artists if a.is_approved),
        total_bookings=random.randint(10, 59),  # Mock data
    )


def unique_categories(artists: list[Artist]) -> list[str]:
    """Every category tag used by the given artists, in first-seen order."""
    return list(dict.fromkeys(tag for artist in artists for tag in artist.category))


def filter_table(artists: list[Artist], search: str = "", category: str = "all") -> list[Artist]:
    """Dashboard table filter: name/location substring and a single category."""
    needle = search.strip().lower()
    rows = []
    for artist in artists:
        if needle and needle not in artist.name.lower() and needle not in artist.location.lower():
            continue
        if category != "all" and category not in artist.category:
            continue
        rows.append(artist)
    return rows


def sort_table(artists: list[Artist], sort_by: TableSortField = "name", order: SortOrder = "asc") -> list[Artist]:
    return sorted(artists, key=_TABLE_SORT_KEYS[sort_by], reverse=order == "desc")


class DashboardService:
    """Review actions on submitted artists."""

    def __init__(self, repository: ArtistRepository):
        self.repository = repository

    async def approve(self, artist_id: str) -> Artist:
        try:
            artist = await self.repository.update(
                artist_id, rating=APPROVED_RATING, experience=APPROVED_EXPERIENCE
            )
        except StorageError as e:
            logger.error(f"[DashboardService] Failed to approve {artist_id}: {e}")
            raise ServiceUnavailableException("Failed to update artist. Please try again.")
        if artist is None:
            raise NotFoundException("Artist not found")
        logger.info(f"[DashboardService] Approved artist {artist_id}")
        return artist

    async def delete(self, artist_id: str) -> None:
        try:
            removed = await self.repository.remove(artist_id)
        except StorageError as e:
            logger.error(f"[DashboardService] Failed to delete {artist_id}: {e}")
            raise ServiceUnavailableException("Failed to delete artist. Please try again.")
        if not removed:
            raise NotFoundException("Artist not found")
        logger.info(f"[DashboardService] Deleted artist {artist_id}")
