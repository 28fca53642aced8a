"""
Preference-based recommender.

Scores every catalog entry against the user's genre/author preferences plus
how often the title has been borrowed or reserved by anyone, and explains
each pick.
"""

import logging

from app.domain.entities import CatalogEntry, Preferences
from app.ports.recommender import RecommendationResult, RecommenderPort
from app.ports.store import KeyValueStorePort
from app.services.ranking import popularity_counts, score_catalog
from app.services.snapshot import open_snapshot

logger = logging.getLogger(__name__)


class PreferenceRecommenderAdapter(RecommenderPort):
    def __init__(self, store: KeyValueStorePort) -> None:
        self._store = store

    async def recommend(
        self,
        username: str,
        override: Preferences | None = None,
        limit: int = 5,
    ) -> list[RecommendationResult]:
        async with open_snapshot(self._store) as snapshot:
            stored = snapshot.preferences.get(username, Preferences())
            preferences = stored.merged(override)

            scored = score_catalog(preferences, snapshot.catalog, snapshot.inventory, limit)
            counts = popularity_counts(snapshot.inventory)
        logger.info(
            "Recommendations for %s: %d result(s) (genre=%s, author=%s)",
            username,
            len(scored),
            preferences.genre,
            preferences.author,
        )
        return [
            RecommendationResult(
                entry=entry,
                score=score,
                reason=_explain(entry, preferences, counts[entry.title]),
            )
            for entry, score in scored
        ]


def _explain(entry: CatalogEntry, preferences: Preferences, popularity: int) -> str:
    reasons = []
    if preferences.genre is not None and entry.genre == preferences.genre:
        reasons.append(f"same genre ({entry.genre})")
    if preferences.author is not None and entry.author == preferences.author:
        reasons.append(f"same author ({entry.author})")
    if popularity:
        times = "time" if popularity == 1 else "times"
        reasons.append(f"borrowed or reserved {popularity} {times}")
    return ", ".join(reasons)
