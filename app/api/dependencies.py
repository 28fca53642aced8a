"""FastAPI dependencies wiring services to the configured store."""

from datetime import timedelta
from functools import lru_cache

from fastapi import Depends

from app.adapters.recommender.preference import PreferenceRecommenderAdapter
from app.adapters.store import build_store
from app.config import settings
from app.ports.recommender import RecommenderPort
from app.ports.store import KeyValueStorePort
from app.services.catalog import CatalogService
from app.services.circulation import CirculationService
from app.services.preferences import PreferenceService


@lru_cache
def get_store() -> KeyValueStorePort:
    return build_store(settings)


def get_catalog_service(store: KeyValueStorePort = Depends(get_store)) -> CatalogService:
    return CatalogService(store)


def get_circulation_service(
    store: KeyValueStorePort = Depends(get_store),
) -> CirculationService:
    return CirculationService(store, loan_period=timedelta(days=settings.loan_period_days))


def get_preference_service(store: KeyValueStorePort = Depends(get_store)) -> PreferenceService:
    return PreferenceService(store)


def get_recommender(store: KeyValueStorePort = Depends(get_store)) -> RecommenderPort:
    return PreferenceRecommenderAdapter(store)
