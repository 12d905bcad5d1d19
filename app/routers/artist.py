"""Artist directory router: browse, filter, sort and paginate artists."""

from typing import Optional

from fastapi import APIRouter, Query

from app.config import get_settings
from app.core.exceptions import NotFoundException, ServiceUnavailableException
from app.dependencies import ArtistRepo, Directory
from app.schemas.artist import (
    FEE_RANGES,
    Artist,
    ArtistListResponse,
    CategoryListResponse,
    FeeRangeListResponse,
    FilterState,
    LocationListResponse,
    SortOption,
)
from app.services.directory_service import DirectorySnapshot, DirectoryService, DirectoryUnavailableError
from app.services.listing_service import ArtistListing
from app.utils.filters import active_filter_count
from app.utils.pagination import page_links

router = APIRouter()


async def _fetch_directory(directory: DirectoryService) -> DirectorySnapshot:
    try:
        return await directory.fetch()
    except DirectoryUnavailableError as e:
        raise ServiceUnavailableException(str(e))


@router.get(
    "/artists",
    response_model=ArtistListResponse,
    summary="Browse artists",
)
async def list_artists(
    directory: Directory,
    repository: ArtistRepo,
    search: str = Query("", max_length=100, description="Free-text search"),
    category: list[str] = Query([], description="Category tags (any match)"),
    category_id: Optional[str] = Query(None, description="Preselect a category by id"),
    location: list[str] = Query([], description="City names (substring match)"),
    price_range: list[str] = Query([], description="Fee band labels (exact match)"),
    sort: SortOption = Query(SortOption.DEFAULT, description="Sort key"),
    page: int = Query(1, description="Page number; pages that don't exist are ignored"),
    per_page: Optional[int] = Query(None, ge=1, le=100, description="Artists per page"),
    include_submitted: bool = Query(False, description="Also list onboarded artists"),
):
    """
    Filtered, sorted and paginated artist directory.

    - All filters combine with AND; an empty filter matches everything
    - Search looks at name, bio, location, categories and languages
    - Requesting a page outside the available range returns page 1
    """
    snapshot = await _fetch_directory(directory)

    artists = list(snapshot.artists)
    if include_submitted:
        artists.extend(await repository.load())

    selected_categories = list(category)
    if category_id:
        # Landing page links pass a category id instead of its name
        match = next((c for c in snapshot.categories if c.id == category_id), None)
        if match and match.name not in selected_categories:
            selected_categories.append(match.name)

    filters = FilterState(
        category=selected_categories,
        location=location,
        price_range=price_range,
        search_term=search,
    )
    page_size = per_page or get_settings().page_size

    listing = ArtistListing(artists, page_size=page_size, filters=filters, sort=sort)
    listing.go_to(page)
    current = listing.current_page()

    return ArtistListResponse(
        artists=current.items,
        total=current.total,
        total_unfiltered=len(artists),
        page=current.page,
        per_page=page_size,
        total_pages=current.total_pages,
        has_next=current.has_next,
        has_prev=current.has_prev,
        page_links=page_links(current.page, current.total_pages),
        showing_from=current.showing_from,
        showing_to=current.showing_to,
        sort=listing.sort,
        filters=filters,
        active_filters=active_filter_count(filters),
    )


@router.get(
    "/artists/{artist_id}",
    response_model=Artist,
    summary="Get artist details",
)
async def get_artist(
    artist_id: str,
    directory: Directory,
    repository: ArtistRepo,
):
    """Get a single artist from the directory or from onboarded submissions."""
    try:
        return await directory.get_artist(artist_id)
    except NotFoundException:
        submitted = await repository.get(artist_id)
        if submitted is None:
            raise
        return submitted
    except DirectoryUnavailableError as e:
        raise ServiceUnavailableException(str(e))


@router.get(
    "/categories",
    response_model=CategoryListResponse,
    summary="List artist categories",
)
async def list_categories(directory: Directory):
    snapshot = await _fetch_directory(directory)
    return CategoryListResponse(categories=snapshot.categories)


@router.get(
    "/locations",
    response_model=LocationListResponse,
    summary="List locations",
)
async def list_locations(directory: Directory):
    snapshot = await _fetch_directory(directory)
    return LocationListResponse(locations=snapshot.locations)


@router.get(
    "/fee-ranges",
    response_model=FeeRangeListResponse,
    summary="List fee bands",
)
async def list_fee_ranges():
    return FeeRangeListResponse(fee_ranges=list(FEE_RANGES))
