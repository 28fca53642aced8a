"""Request/response models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.entities import RecordStatus


class BookCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=500)
    author: str = Field(min_length=1, max_length=300)
    genre: str | None = Field(default=None, max_length=100)


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    author: str
    genre: str | None = None
    available: bool


class TitleRequest(BaseModel):
    title: str = Field(min_length=1)


class InventoryRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    title: str
    status: RecordStatus
    borrowed_on: datetime | None = None
    return_date: datetime | None = None
    reserved_on: datetime | None = None


class CirculationResponse(BaseModel):
    message: str
    record: InventoryRecordResponse


class BorrowedByResponse(BaseModel):
    username: str
    record: InventoryRecordResponse


class RemovedBookResponse(BaseModel):
    message: str
    book: BookResponse


class PreferencesRequest(BaseModel):
    genre: str | None = None
    author: str | None = None


class PreferencesResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    genre: str | None = None
    author: str | None = None


class RecommendationItem(BaseModel):
    title: str
    author: str
    genre: str | None = None
    available: bool
    score: float
    reason: str


class RecommendationsResponse(BaseModel):
    recommendations: list[RecommendationItem]
