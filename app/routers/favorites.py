"""Favorite artists router."""

from fastapi import APIRouter

from app.dependencies import FavoritesRepo
from app.schemas.dashboard import FavoritesResponse, FavoriteToggleResponse

router = APIRouter()


@router.get("", response_model=FavoritesResponse, summary="List favorite artists")
async def list_favorites(favorites: FavoritesRepo):
    return FavoritesResponse(favorites=await favorites.load())


@router.post(
    "/{artist_id}",
    response_model=FavoriteToggleResponse,
    summary="Toggle a favorite artist",
)
async def toggle_favorite(artist_id: str, favorites: FavoritesRepo):
    is_favorite = await favorites.toggle(artist_id)
    return FavoriteToggleResponse(artist_id=artist_id, is_favorite=is_favorite)


@router.delete("/{artist_id}", response_model=FavoritesResponse, summary="Remove a favorite artist")
async def remove_favorite(artist_id: str, favorites: FavoritesRepo):
    return FavoritesResponse(favorites=await favorites.remove(artist_id))
