import pytest

from app.schemas.artist import Artist, FilterState
from app.utils.filters import (
    SearchScope,
    active_filter_count,
    filter_artists,
    has_active_filters,
    matches,
)


def _ids(artists):
    return [artist.id for artist in artists]


def test_empty_filter_state_returns_input_unchanged(artists):
    assert filter_artists(artists, FilterState()) == artists


def test_blank_search_term_matches_everything(artists):
    assert filter_artists(artists, FilterState(search_term="   ")) == artists


def test_search_is_case_insensitive_on_name(artists):
    assert _ids(filter_artists(artists, FilterState(search_term="PRIYA"))) == ["a1"]


@pytest.mark.parametrize(
    "term, expected",
    [
        ("bharatanatyam", ["a1"]),    # bio
        ("pune", ["a3"]),             # location
        ("music producer", ["a2"]),   # category tag
        ("malayalam", ["a4"]),        # language tag
    ],
)
def test_search_checks_every_text_field(artists, term, expected):
    assert _ids(filter_artists(artists, FilterState(search_term=term))) == expected


def test_minimal_search_only_checks_name_and_bio(artists):
    filters = FilterState(search_term="pune")
    assert filter_artists(artists, filters, SearchScope.MINIMAL) == []
    filters = FilterState(search_term="choreographer")
    assert _ids(filter_artists(artists, filters, SearchScope.MINIMAL)) == ["a4"]


def test_category_filter_needs_any_overlap(artists):
    filters = FilterState(category=["Dancer", "DJ"])
    assert _ids(filter_artists(artists, filters)) == ["a1", "a2", "a4"]


def test_location_filter_is_case_insensitive_substring(artists):
    filters = FilterState(location=["mumbai", "Kochi"])
    assert _ids(filter_artists(artists, filters)) == ["a1", "a4"]


def test_price_range_filter_is_exact_label_match(artists):
    filters = FilterState(price_range=["₹15,000 - ₹30,000"])
    assert _ids(filter_artists(artists, filters)) == ["a2"]
    # A label that merely overlaps numerically doesn't match
    filters = FilterState(price_range=["₹15,000 - ₹50,000"])
    assert filter_artists(artists, filters) == []


def test_all_criteria_must_hold(artists):
    filters = FilterState(category=["Dancer"], location=["Maharashtra"])
    assert _ids(filter_artists(artists, filters)) == ["a1"]


def test_adding_a_category_never_grows_the_match_set(artists):
    base = FilterState(location=["Maharashtra"])
    base_ids = set(_ids(filter_artists(artists, base)))
    for category in ["Dancer", "DJ", "Comedian", "Nobody"]:
        narrowed = base.model_copy(update={"category": [category]})
        assert set(_ids(filter_artists(artists, narrowed))) <= base_ids


def test_missing_fields_never_raise():
    artist = Artist.model_construct(
        id="x", name="No Details", bio=None, category=None,
        languages=None, location=None, fee_range=None,
    )
    assert matches(artist, FilterState()) is True
    assert matches(artist, FilterState(search_term="details")) is True
    assert matches(artist, FilterState(search_term="hindi")) is False
    assert matches(artist, FilterState(category=["Singer"])) is False
    assert matches(artist, FilterState(location=["Pune"])) is False
    assert matches(artist, FilterState(price_range=["₹1,00,000+"])) is False


def test_none_lists_are_read_as_empty():
    artist = Artist.model_validate({"id": "x", "name": "Loose", "category": None, "languages": None})
    assert artist.category == []
    assert artist.languages == []


def test_active_filter_count():
    filters = FilterState(category=["Dancer", "DJ"], price_range=["₹1,00,000+"], search_term=" dj ")
    assert active_filter_count(filters) == 4
    assert has_active_filters(filters)
    assert not has_active_filters(FilterState(search_term="  "))
