"""
Title search and preference scoring over an in-memory catalog.

Both rankers order candidates by ``cost + heuristic`` with a constant cost,
so the ordering is decided by the heuristic alone:

  * search:          heuristic = |len(title) - len(query)|
  * recommendations: heuristic = 1 / similarity

Sorting is stable, so equal totals keep catalog order.
"""

from collections import Counter
from collections.abc import Iterable, Sequence

from app.domain.entities import CatalogEntry, Preferences, UserInventory

MATCH_COST = 1

# ── Recommendation weights ───────────────────────────────────────
GENRE_WEIGHT = 2.0
AUTHOR_WEIGHT = 2.0
POPULARITY_DIVISOR = 5.0
RECOMMENDATION_LIMIT = 5


def text_length(text: str) -> int:
    """Length in UTF-16 code units, the unit browser clients count in."""
    return len(text.encode("utf-16-le", "surrogatepass")) // 2


def title_distance(title: str, query: str) -> int:
    return abs(text_length(title) - text_length(query))


def rank(
    query: str,
    catalog: Sequence[CatalogEntry],
    limit: int = 1,
) -> list[CatalogEntry]:
    """
    Return catalog entries whose title contains ``query`` (case-insensitive),
    closest title length first.

    With the default ``limit`` of 1 this is the single best match; an empty
    query matches every title and so returns the shortest one.
    """
    if limit < 1:
        return []
    needle = query.lower()
    matches = [entry for entry in catalog if needle in entry.title.lower()]

    if limit == 1:
        best: CatalogEntry | None = None
        best_total = 0
        for entry in matches:
            total = MATCH_COST + title_distance(entry.title, query)
            if best is None or total < best_total:
                best, best_total = entry, total
        return [best] if best is not None else []

    ordered = sorted(matches, key=lambda e: MATCH_COST + title_distance(e.title, query))
    return ordered[:limit]


def popularity_counts(inventory: UserInventory) -> Counter[str]:
    """Count borrow and reserve records per title across every user."""
    counts: Counter[str] = Counter()
    for records in inventory.values():
        counts.update(record.title for record in records)
    return counts


def similarity(
    entry: CatalogEntry,
    preferences: Preferences,
    popularity: int = 0,
) -> float:
    score = 0.0
    if preferences.genre is not None and entry.genre == preferences.genre:
        score += GENRE_WEIGHT
    if preferences.author is not None and entry.author == preferences.author:
        score += AUTHOR_WEIGHT
    score += popularity / POPULARITY_DIVISOR
    return score


def score_catalog(
    preferences: Preferences,
    catalog: Iterable[CatalogEntry],
    inventory: UserInventory,
    limit: int = RECOMMENDATION_LIMIT,
) -> list[tuple[CatalogEntry, float]]:
    """Return up to ``limit`` ``(entry, similarity)`` pairs, best first.

    Entries with no similarity at all are left out.
    """
    counts = popularity_counts(inventory)
    candidates: list[tuple[CatalogEntry, float]] = []
    for entry in catalog:
        score = similarity(entry, preferences, counts[entry.title])
        if score > 0:
            candidates.append((entry, score))

    candidates.sort(key=lambda pair: MATCH_COST + 1 / pair[1])
    return candidates[:limit]


def recommend(
    preferences: Preferences,
    catalog: Iterable[CatalogEntry],
    inventory: UserInventory,
    limit: int = RECOMMENDATION_LIMIT,
) -> list[CatalogEntry]:
    return [entry for entry, _ in score_catalog(preferences, catalog, inventory, limit)]
