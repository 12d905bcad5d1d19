"""Dashboard schemas."""

from app.schemas.artist import Artist, CamelModel


class DashboardStats(CamelModel):
    """Counters shown above the submissions table."""
    total_artists: int = 0
    pending_review: int = 0
    approved: int = 0
    total_bookings: int = 0  # Mock figure, not backed by data


class DashboardResponse(CamelModel):
    """Submitted artists for the manager dashboard."""
    artists: list[Artist]
    stats: DashboardStats
    categories: list[str]  # Options for the category filter
    total: int
    filtered: int


class FavoritesResponse(CamelModel):
    favorites: list[str]


class FavoriteToggleResponse(CamelModel):
    artist_id: str
    is_favorite: bool
