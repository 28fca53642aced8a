"""Tests for title search and recommendation scoring."""

from datetime import datetime, timedelta, timezone

import pytest

from app.domain.entities import CatalogEntry, InventoryRecord, Preferences
from app.services.ranking import (
    popularity_counts,
    rank,
    recommend,
    score_catalog,
    similarity,
    text_length,
    title_distance,
)

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _book(title: str, author: str = "Someone", genre: str | None = None) -> CatalogEntry:
    return CatalogEntry(title=title, author=author, genre=genre)


def _borrowed(title: str) -> InventoryRecord:
    return InventoryRecord.borrowed(title, NOW, timedelta(days=7))


# ── Search ─────────────────────────────────────────


def test_rank_returns_single_substring_match():
    catalog = [_book("The Great Gatsby"), _book("1984")]
    assert rank("the", catalog) == [catalog[0]]


def test_rank_is_case_insensitive():
    catalog = [_book("Moby Dick")]
    assert rank("MOBY", catalog) == [catalog[0]]


def test_rank_no_match_returns_empty():
    catalog = [_book("The Great Gatsby"), _book("1984")]
    assert rank("xyz-no-match", catalog) == []


def test_rank_empty_catalog():
    assert rank("anything", []) == []


def test_rank_prefers_closest_title_length():
    catalog = [_book("Dune Messiah"), _book("Dune"), _book("Children of Dune")]
    assert rank("dune", catalog) == [catalog[1]]


def test_rank_ties_keep_catalog_order():
    catalog = [_book("Cat A"), _book("Cat B"), _book("Cat")]
    # "Cat A" and "Cat B" tie; "Cat" is an exact-length match
    assert rank("cat", catalog) == [catalog[2]]
    assert rank("cat", catalog[:2]) == [catalog[0]]


def test_rank_empty_query_returns_shortest_title(sample_catalog):
    assert rank("", sample_catalog) == [sample_catalog[1]]  # "1984"


def test_rank_result_has_minimal_distance(sample_catalog):
    query = "a"
    [best] = rank(query, sample_catalog)
    matches = [e for e in sample_catalog if query in e.title.lower()]
    assert best in matches
    assert title_distance(best.title, query) == min(
        title_distance(e.title, query) for e in matches
    )


def test_rank_limit_returns_ordered_slice():
    catalog = [_book("Dune Messiah"), _book("Dune"), _book("Children of Dune")]
    assert rank("dune", catalog, limit=3) == [catalog[1], catalog[0], catalog[2]]
    assert rank("dune", catalog, limit=2) == [catalog[1], catalog[0]]


def test_rank_non_positive_limit():
    assert rank("dune", [_book("Dune")], limit=0) == []


def test_text_length_counts_utf16_units():
    assert text_length("abc") == 3
    assert text_length("\U0001F4DA") == 2  # outside the BMP


# ── Recommendations ────────────────────────────────


def test_recommend_genre_and_author_match():
    catalog = [
        CatalogEntry(title="1984", author="George Orwell", genre="Dystopian"),
        CatalogEntry(title="Gatsby", author="F. Scott Fitzgerald", genre="Classic"),
    ]
    prefs = Preferences(genre="Dystopian", author="George Orwell")
    assert similarity(catalog[0], prefs) == 4
    assert similarity(catalog[1], prefs) == 0
    assert recommend(prefs, catalog, {}) == [catalog[0]]


def test_recommend_orders_by_descending_similarity(sample_catalog):
    prefs = Preferences(genre="Dystopian", author="George Orwell")
    titles = [e.title for e in recommend(prefs, sample_catalog, {})]
    # 1984: 4, Animal Farm: 2, Brave New World: 2 (catalog order on ties)
    assert titles == ["1984", "Animal Farm", "Brave New World"]


def test_popularity_adds_fractional_score(sample_catalog):
    inventory = {
        "ann": [_borrowed("Moby Dick"), InventoryRecord.reserved("Moby Dick", NOW)],
        "bob": [InventoryRecord.reserved("Moby Dick", NOW)],
    }
    assert popularity_counts(inventory)["Moby Dick"] == 3

    scored = score_catalog(Preferences(), sample_catalog, inventory)
    assert scored == [(sample_catalog[4], pytest.approx(0.6))]


def test_popularity_outranks_nothing_but_not_preferences(sample_catalog):
    inventory = {"ann": [_borrowed("Moby Dick")]}
    prefs = Preferences(author="Aldous Huxley")
    titles = [e.title for e in recommend(prefs, sample_catalog, inventory)]
    assert titles == ["Brave New World", "Moby Dick"]


def test_recommend_caps_at_five():
    catalog = [_book(f"Book {i}", genre="Poetry") for i in range(8)]
    result = recommend(Preferences(genre="Poetry"), catalog, {})
    assert result == catalog[:5]


def test_recommend_excludes_zero_similarity(sample_catalog):
    assert recommend(Preferences(genre="Horror"), sample_catalog, {}) == []


def test_missing_preference_never_matches_missing_genre():
    entry = _book("Untitled")  # no genre
    assert similarity(entry, Preferences()) == 0


def test_lone_surrogate_title_is_searchable():
    catalog = [_book("Caf\ud800"), _book("Cafeteria")]
    assert text_length("Caf\ud800") == 4
    assert rank("caf", catalog) == [catalog[0]]
