"""Manager dashboard router."""

from fastapi import APIRouter, Query, status

from app.dependencies import ArtistRepo, Dashboard
from app.schemas.artist import Artist
from app.schemas.dashboard import DashboardResponse
from app.services.dashboard_service import (
    SortOrder,
    TableSortField,
    compute_stats,
    filter_table,
    sort_table,
    unique_categories,
)

router = APIRouter()


@router.get(
    "",
    response_model=DashboardResponse,
    summary="List submitted artists",
)
async def get_dashboard(
    repository: ArtistRepo,
    search: str = Query("", max_length=100, description="Search by name or location"),
    category: str = Query("all", description="Category tag, or 'all'"),
    sort_by: TableSortField = Query("name"),
    order: SortOrder = Query("asc"),
):
    """
    Submitted artists with review stats.

    Stats always cover every submission; search and category only narrow
    the table rows.
    """
    artists = await repository.load()
    rows = sort_table(filter_table(artists, search, category), sort_by, order)

    return DashboardResponse(
        artists=rows,
        stats=compute_stats(artists),
        categories=unique_categories(artists),
        total=len(artists),
        filtered=len(rows),
    )


@router.post(
    "/artists/{artist_id}/approve",
    response_model=Artist,
    summary="Approve a submitted artist",
)
async def approve_artist(artist_id: str, dashboard: Dashboard):
    return await dashboard.approve(artist_id)


@router.delete(
    "/artists/{artist_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a submitted artist",
)
async def delete_artist(artist_id: str, dashboard: Dashboard):
    await dashboard.delete(artist_id)
