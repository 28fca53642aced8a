"""Recommendation & preference routes."""

from fastapi import APIRouter, Depends, Query

from app.api.dependencies import get_preference_service, get_recommender
from app.api.middleware.session import get_current_username
from app.api.schemas import (
    PreferencesRequest,
    PreferencesResponse,
    RecommendationItem,
    RecommendationsResponse,
)
from app.config import settings
from app.domain.entities import Preferences
from app.ports.recommender import RecommenderPort
from app.services.preferences import PreferenceService

router = APIRouter(tags=["Intelligence"])


@router.get("/recommendations", response_model=RecommendationsResponse)
async def get_recommendations(
    genre: str | None = Query(default=None),
    author: str | None = Query(default=None),
    limit: int | None = Query(default=None, ge=1, le=50),
    username: str = Depends(get_current_username),
    recommender: RecommenderPort = Depends(get_recommender),
) -> RecommendationsResponse:
    """
    Suggest books for the current user.

    ``genre`` / ``author`` override the stored preferences for this call
    only.
    """
    override = Preferences(genre=genre, author=author)
    results = await recommender.recommend(
        username,
        override=override,
        limit=limit or settings.recommendation_limit,
    )
    items = [
        RecommendationItem(
            title=rec.entry.title,
            author=rec.entry.author,
            genre=rec.entry.genre,
            available=rec.entry.available,
            score=rec.score,
            reason=rec.reason,
        )
        for rec in results
    ]
    return RecommendationsResponse(recommendations=items)


@router.get("/preferences", response_model=PreferencesResponse)
async def get_preferences(
    username: str = Depends(get_current_username),
    service: PreferenceService = Depends(get_preference_service),
) -> PreferencesResponse:
    prefs = await service.get_preferences(username)
    return PreferencesResponse.model_validate(prefs)


@router.put("/preferences", response_model=PreferencesResponse)
async def update_preferences(
    data: PreferencesRequest,
    username: str = Depends(get_current_username),
    service: PreferenceService = Depends(get_preference_service),
) -> PreferencesResponse:
    """Update the user's genre/author preferences for recommendations."""
    prefs = await service.set_preferences(
        username, Preferences(genre=data.genre, author=data.author)
    )
    return PreferencesResponse.model_validate(prefs)
