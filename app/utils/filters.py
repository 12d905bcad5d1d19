"""
Directory filter predicates.

An artist is kept when it satisfies every active criterion of a
FilterState (search term, categories, locations, fee bands). Empty
criteria always match, so an empty FilterState keeps everything.
"""
from enum import Enum
from typing import Iterable, Sequence

from app.schemas.artist import Artist, FilterState


class SearchScope(str, Enum):
    """Which artist fields the free-text search looks at."""
    FULL = "full"        # name, bio, location, categories, languages
    MINIMAL = "minimal"  # name and bio only


def _contains(haystack: str | None, needle: str) -> bool:
    return bool(haystack) and needle in haystack.lower()


def _any_contains(values: Iterable[str] | None, needle: str) -> bool:
    return any(_contains(value, needle) for value in values or [])


def matches_search(artist: Artist, term: str, scope: SearchScope = SearchScope.FULL) -> bool:
    needle = (term or "").strip().lower()
    if not needle:
        return True

    if _contains(artist.name, needle) or _contains(artist.bio, needle):
        return True
    if scope is SearchScope.MINIMAL:
        return False

    return (
        _contains(artist.location, needle)
        or _any_contains(artist.category, needle)
        or _any_contains(artist.languages, needle)
    )


def matches_category(artist: Artist, selected: Sequence[str]) -> bool:
    if not selected:
        return True
    return not set(artist.category or []).isdisjoint(selected)


def matches_location(artist: Artist, selected: Sequence[str]) -> bool:
    if not selected:
        return True
    return any(_contains(artist.location, loc.lower()) for loc in selected)


def matches_price_range(artist: Artist, selected: Sequence[str]) -> bool:
    # Exact label membership, not numeric containment
    if not selected:
        return True
    return artist.fee_range in selected


def matches(artist: Artist, filters: FilterState, scope: SearchScope = SearchScope.FULL) -> bool:
    """Return True if the artist passes every active criterion."""
    return (
        matches_search(artist, filters.search_term, scope)
        and matches_category(artist, filters.category)
        and matches_location(artist, filters.location)
        and matches_price_range(artist, filters.price_range)
    )


def has_active_filters(filters: FilterState) -> bool:
    return active_filter_count(filters) > 0


def active_filter_count(filters: FilterState) -> int:
    """Number of selected chips, plus one for a non-blank search term."""
    count = len(filters.category) + len(filters.location) + len(filters.price_range)
    if filters.search_term.strip():
        count += 1
    return count


def filter_artists(
    artists: list[Artist],
    filters: FilterState,
    scope: SearchScope = SearchScope.FULL,
) -> list[Artist]:
    """Keep the artists matching `filters`, preserving input order."""
    if not has_active_filters(filters):
        return list(artists)
    return [artist for artist in artists if matches(artist, filters, scope)]
