"""
Artist directory data source.

Serves the catalogue of featured artists plus the category and location
lookups used by the directory filters. Data is in-memory mock content
returned after a simulated network delay.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from app.config import get_settings
from app.core.exceptions import NotFoundException
from app.schemas.artist import Artist, Category, Location

logger = logging.getLogger(__name__)


class DirectoryUnavailableError(Exception):
    """The directory could not be fetched. The message is user-facing."""


@dataclass(frozen=True)
class DirectorySnapshot:
    artists: list[Artist]
    categories: list[Category]
    locations: list[Location]


MOCK_ARTISTS: list[dict] = [
    {
        "id": "1",
        "name": "Priya Sharma",
        "bio": "Classical Indian dancer with 15 years of experience in Bharatanatyam and Kathak. Performed at national and international stages.",
        "category": ["Dancer", "Cultural Performer"],
        "languages": ["Hindi", "English", "Tamil"],
        "feeRange": "₹30,000 - ₹50,000",
        "location": "Mumbai, Maharashtra",
        "profileImage": "/api/placeholder/300/400",
        "rating": 4.8,
        "experience": "15+ years",
        "availability": True,
    },
    {
        "id": "2",
        "name": "Rajesh Kumar",
        "bio": "Professional DJ and music producer specializing in Bollywood, Electronic, and Fusion music for weddings and corporate events.",
        "category": ["DJ", "Music Producer"],
        "languages": ["Hindi", "English", "Punjabi"],
        "feeRange": "₹15,000 - ₹30,000",
        "location": "Delhi, NCR",
        "profileImage": "/api/placeholder/300/400",
        "rating": 4.6,
        "experience": "8+ years",
        "availability": True,
    },
    {
        "id": "3",
        "name": "Anita Desai",
        "bio": "Motivational speaker and corporate trainer with expertise in leadership development and team building workshops.",
        "category": ["Speaker", "Trainer"],
        "languages": ["English", "Hindi", "Gujarati"],
        "feeRange": "₹15,000 - ₹30,000",
        "location": "Bangalore, Karnataka",
        "profileImage": "/api/placeholder/300/400",
        "rating": 4.9,
        "experience": "12+ years",
        "availability": False,
    },
    {
        "id": "4",
        "name": "Arjun Singh",
        "bio": "Bollywood playback singer and live performer. Winner of multiple singing competitions and featured in regional films.",
        "category": ["Singer", "Performer"],
        "languages": ["Hindi", "English", "Punjabi", "Haryanvi"],
        "feeRange": "₹50,000 - ₹1,00,000",
        "location": "Chandigarh, Punjab",
        "profileImage": "/api/placeholder/300/400",
        "rating": 4.7,
        "experience": "10+ years",
        "availability": True,
    },
    {
        "id": "5",
        "name": "Meera Nair",
        "bio": "Contemporary dance choreographer and performer specializing in fusion dance forms for modern events and shows.",
        "category": ["Dancer", "Choreographer"],
        "languages": ["English", "Malayalam", "Tamil"],
        "feeRange": "₹30,000 - ₹50,000",
        "location": "Kochi, Kerala",
        "profileImage": "/api/placeholder/300/400",
        "rating": 4.5,
        "experience": "7+ years",
        "availability": True,
    },
    {
        "id": "6",
        "name": "Vikram Joshi",
        "bio": "Stand-up comedian and entertainment host with experience in corporate events, weddings, and private parties.",
        "category": ["Comedian", "Host"],
        "languages": ["Hindi", "English", "Marathi"],
        "feeRange": "₹5,000 - ₹15,000",
        "location": "Pune, Maharashtra",
        "profileImage": "/api/placeholder/300/400",
        "rating": 4.4,
        "experience": "5+ years",
        "availability": True,
    },
]

MOCK_CATEGORIES: list[dict] = [
    {"id": "1", "name": "Singer", "icon": "🎤", "description": "Vocal performers and musicians"},
    {"id": "2", "name": "Dancer", "icon": "💃", "description": "Classical and contemporary dancers"},
    {"id": "3", "name": "DJ", "icon": "🎧", "description": "Music mixing and entertainment"},
    {"id": "4", "name": "Speaker", "icon": "🎯", "description": "Motivational and keynote speakers"},
    {"id": "5", "name": "Comedian", "icon": "😄", "description": "Stand-up and entertainment comedy"},
    {"id": "6", "name": "Host", "icon": "🎭", "description": "Event hosting and anchoring"},
    {"id": "7", "name": "Cultural Performer", "icon": "🎨", "description": "Traditional and cultural arts"},
    {"id": "8", "name": "Music Producer", "icon": "🎵", "description": "Music production and arrangement"},
]

MOCK_LOCATIONS: list[dict] = [
    {"id": "1", "city": "Mumbai", "state": "Maharashtra", "country": "India"},
    {"id": "2", "city": "Delhi", "state": "Delhi", "country": "India"},
    {"id": "3", "city": "Bangalore", "state": "Karnataka", "country": "India"},
    {"id": "4", "city": "Chennai", "state": "Tamil Nadu", "country": "India"},
    {"id": "5", "city": "Hyderabad", "state": "Telangana", "country": "India"},
    {"id": "6", "city": "Pune", "state": "Maharashtra", "country": "India"},
    {"id": "7", "city": "Kolkata", "state": "West Bengal", "country": "India"},
    {"id": "8", "city": "Ahmedabad", "state": "Gujarat", "country": "India"},
    {"id": "9", "city": "Jaipur", "state": "Rajasthan", "country": "India"},
    {"id": "10", "city": "Kochi", "state": "Kerala", "country": "India"},
]


def load_mock_directory() -> DirectorySnapshot:
    return DirectorySnapshot(
        artists=[Artist.model_validate(a) for a in MOCK_ARTISTS],
        categories=[Category.model_validate(c) for c in MOCK_CATEGORIES],
        locations=[Location.model_validate(loc) for loc in MOCK_LOCATIONS],
    )


class DirectoryService:
    """Read-only provider of the artist directory."""

    def __init__(
        self,
        loader: Callable[[], DirectorySnapshot] = load_mock_directory,
        delay: Optional[float] = None,
        artist_delay: Optional[float] = None,
    ):
        settings = get_settings()
        self._loader = loader
        self.delay = settings.directory_delay_seconds if delay is None else delay
        self.artist_delay = settings.artist_delay_seconds if artist_delay is None else artist_delay

    async def fetch(self) -> DirectorySnapshot:
        """
        Fetch artists, categories and locations.

        Raises:
            DirectoryUnavailableError: if the underlying source fails.
        """
        await asyncio.sleep(self.delay)
        try:
            return self._loader()
        except Exception as e:
            logger.error(f"[DirectoryService] Failed to load directory: {type(e).__name__}: {e}")
            raise DirectoryUnavailableError(str(e) or "Failed to fetch data") from e

    async def get_artist(self, artist_id: str) -> Artist:
        """Look up a single directory artist by id."""
        await asyncio.sleep(self.artist_delay)
        try:
            snapshot = self._loader()
        except Exception as e:
            logger.error(f"[DirectoryService] Failed to load artist {artist_id}: {type(e).__name__}: {e}")
            raise DirectoryUnavailableError(str(e) or "Failed to fetch artist") from e

        for artist in snapshot.artists:
            if artist.id == artist_id:
                return artist
        raise NotFoundException("Artist not found")


# Singleton instance
directory_service = DirectoryService()
