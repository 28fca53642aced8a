"""Recommender port — abstract interface for the recommendation engine."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from app.domain.entities import CatalogEntry, Preferences


@dataclass
class RecommendationResult:
    """A single recommendation with score and explanation."""

    entry: CatalogEntry
    score: float
    reason: str


class RecommenderPort(ABC):
    """Abstraction for the book recommendation engine."""

    @abstractmethod
    async def recommend(
        self,
        username: str,
        override: Preferences | None = None,
        limit: int = 5,
    ) -> list[RecommendationResult]:
        """Return ranked book recommendations for a user."""
        ...
