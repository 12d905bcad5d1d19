"""Filter -> sort -> paginate pipeline for the artist directory."""
from app.schemas.artist import Artist, FilterState, SortOption
from app.utils.filters import SearchScope, filter_artists
from app.utils.pagination import Page, PageCursor, paginate, total_pages
from app.utils.sorting import sort_artists


class ArtistListing:
    """
    State of one directory view: the source list, the active filters and
    sort key, and the current page.

    Changing the filters or the sort key goes back to page 1. Navigating
    to a page that doesn't exist leaves the current page as it is.
    """

    def __init__(
        self,
        artists: list[Artist],
        page_size: int,
        filters: FilterState | None = None,
        sort: SortOption = SortOption.DEFAULT,
        scope: SearchScope = SearchScope.FULL,
    ):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.artists = artists
        self.page_size = page_size
        self.filters = filters or FilterState()
        self.sort = SortOption(sort)
        self.scope = scope
        self.cursor = PageCursor()
        self._results: list[Artist] | None = None

    @property
    def results(self) -> list[Artist]:
        """Filtered and sorted artists (cached until filters/sort change)."""
        if self._results is None:
            filtered = filter_artists(self.artists, self.filters, self.scope)
            self._results = sort_artists(filtered, self.sort)
        return self._results

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.results), self.page_size)

    def set_filters(self, filters: FilterState) -> None:
        self.filters = filters
        self._results = None
        self.cursor.reset()

    def set_sort(self, sort: SortOption) -> None:
        self.sort = SortOption(sort)
        self._results = None
        self.cursor.reset()

    def go_to(self, page: int) -> int:
        return self.cursor.go_to(page, self.total_pages)

    def current_page(self) -> Page[Artist]:
        return paginate(self.results, self.page_size, self.cursor.page)
