"""Directory sort keys. Every sort is stable and returns a new list."""
import re
import unicodedata

from app.schemas.artist import Artist, SortOption

_FIRST_NUMBER = re.compile(r"\d[\d,]*")


def fee_floor(fee_range: str | None) -> int:
    """
    Lower bound of a fee band label, e.g. "₹15,000 - ₹30,000" -> 15000.

    Uses the first number in the text with thousands separators stripped;
    labels without a number count as 0.
    """
    match = _FIRST_NUMBER.search(fee_range or "")
    if not match:
        return 0
    return int(match.group().replace(",", ""))


def name_key(artist: Artist) -> tuple[str, str]:
    """
    Collation key for names: accents and case are ignored first
    ("Émile" sorts with "Emile", before "Zoe"), then break ties.
    """
    folded = unicodedata.normalize("NFKD", artist.name.casefold())
    base = "".join(ch for ch in folded if not unicodedata.combining(ch))
    return base, folded


def sort_artists(artists: list[Artist], sort: SortOption | str = SortOption.DEFAULT) -> list[Artist]:
    sort = SortOption(sort)

    if sort is SortOption.NAME_ASC:
        return sorted(artists, key=name_key)
    if sort is SortOption.NAME_DESC:
        return sorted(artists, key=name_key, reverse=True)
    if sort is SortOption.PRICE_ASC:
        return sorted(artists, key=lambda a: fee_floor(a.fee_range))
    if sort is SortOption.PRICE_DESC:
        return sorted(artists, key=lambda a: fee_floor(a.fee_range), reverse=True)
    if sort is SortOption.RATING_DESC:
        return sorted(artists, key=lambda a: a.rating or 0, reverse=True)

    # Default keeps the incoming order
    return list(artists)
