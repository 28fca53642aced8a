"""Per-user recommendation preferences."""

import logging

from app.domain.entities import Preferences
from app.ports.store import KeyValueStorePort
from app.services.snapshot import open_snapshot

logger = logging.getLogger(__name__)


class PreferenceService:
    def __init__(self, store: KeyValueStorePort) -> None:
        self._store = store

    async def get_preferences(self, username: str) -> Preferences:
        """Stored preferences for ``username``; empty ones if never set."""
        async with open_snapshot(self._store) as snapshot:
            return snapshot.preferences.get(username, Preferences())

    async def set_preferences(self, username: str, preferences: Preferences) -> Preferences:
        async with open_snapshot(self._store) as snapshot:
            snapshot.preferences[username] = preferences
            await snapshot.save_preferences()
        logger.info(
            "Preferences for %s: genre=%s, author=%s",
            username,
            preferences.genre,
            preferences.author,
        )
        return preferences
