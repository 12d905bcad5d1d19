"""Artist directory schemas."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel


# Fixed, ordered fee bands an artist can pick from
FEE_RANGES: tuple[str, ...] = (
    "₹5,000 - ₹15,000",
    "₹15,000 - ₹30,000",
    "₹30,000 - ₹50,000",
    "₹50,000 - ₹1,00,000",
    "₹1,00,000+",
)


class CamelModel(BaseModel):
    """Base schema that reads and writes camelCase keys (feeRange, profileImage...)."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


# ============== Directory Records ==============

class Artist(CamelModel):
    """A performing artist listed in the directory or submitted via onboarding."""
    id: str
    name: str
    bio: str = ""
    category: list[str] = []
    languages: list[str] = []
    fee_range: str = ""
    location: str = ""
    profile_image: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0, le=5)
    experience: Optional[str] = None
    availability: bool = True
    submitted_at: Optional[datetime] = None

    @field_validator("category", "languages", mode="before")
    @classmethod
    def _missing_list_is_empty(cls, value):
        return [] if value is None else value

    @field_validator("bio", "location", "fee_range", mode="before")
    @classmethod
    def _missing_text_is_blank(cls, value):
        return "" if value is None else value

    @property
    def is_approved(self) -> bool:
        return bool(self.rating)


class Category(BaseModel):
    """Lookup record used to populate the category filter."""
    id: str
    name: str
    icon: str = ""
    description: str = ""


class Location(BaseModel):
    """Lookup record used to populate the location filter."""
    id: str
    city: str
    state: str
    country: str


class FilterState(CamelModel):
    """Directory filter selection. Every field empty means "no filtering"."""
    category: list[str] = []
    location: list[str] = []
    price_range: list[str] = []
    search_term: str = ""


class SortOption(str, Enum):
    """Directory sort keys."""
    DEFAULT = "default"
    NAME_ASC = "name-asc"
    NAME_DESC = "name-desc"
    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    RATING_DESC = "rating-desc"


# ============== Responses ==============

class ArtistListResponse(CamelModel):
    """Schema for a filtered, sorted and paginated directory page."""
    artists: list[Artist]
    total: int
    total_unfiltered: int
    page: int
    per_page: int
    total_pages: int
    has_next: bool
    has_prev: bool
    page_links: list[Optional[int]]  # None marks a collapsed run ("...")
    showing_from: int
    showing_to: int
    sort: SortOption
    filters: FilterState
    active_filters: int


class CategoryListResponse(CamelModel):
    categories: list[Category]


class LocationListResponse(CamelModel):
    locations: list[Location]


class FeeRangeListResponse(CamelModel):
    fee_ranges: list[str]
