"""Catalog, search, borrow and reserve routes."""

from fastapi import APIRouter, Depends, Query, status

from app.api.dependencies import get_catalog_service, get_circulation_service
from app.api.middleware.session import get_current_username
from app.api.schemas import (
    BookCreateRequest,
    BookResponse,
    CirculationResponse,
    InventoryRecordResponse,
    RemovedBookResponse,
    TitleRequest,
)
from app.services.catalog import CatalogService
from app.services.circulation import CirculationService

router = APIRouter(prefix="/books", tags=["Books"])


@router.get("", response_model=list[BookResponse])
async def list_books(
    service: CatalogService = Depends(get_catalog_service),
) -> list[BookResponse]:
    """The whole catalog in shelf order; list positions are the remove indexes."""
    books = await service.list_books()
    return [BookResponse.model_validate(b) for b in books]


@router.post("", response_model=BookResponse, status_code=status.HTTP_201_CREATED)
async def add_book(
    data: BookCreateRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> BookResponse:
    entry = await service.add_book(data.title, data.author, data.genre)
    return BookResponse.model_validate(entry)


@router.delete("/{index}", response_model=RemovedBookResponse)
async def remove_book(
    index: int,
    service: CatalogService = Depends(get_catalog_service),
) -> RemovedBookResponse:
    removed = await service.remove_book(index)
    return RemovedBookResponse(
        message=f'"{removed.title}" has been removed.',
        book=BookResponse.model_validate(removed),
    )


@router.get("/search", response_model=list[BookResponse])
async def search_books(
    q: str = Query(default=""),
    limit: int = Query(default=1, ge=1, le=100),
    service: CatalogService = Depends(get_catalog_service),
) -> list[BookResponse]:
    """Best title match for ``q``; pass ``limit`` for the runners-up too."""
    results = await service.search(q, limit=limit)
    return [BookResponse.model_validate(b) for b in results]


@router.get("/unavailable", response_model=list[BookResponse])
async def list_unavailable(
    service: CatalogService = Depends(get_catalog_service),
) -> list[BookResponse]:
    books = await service.unavailable_books()
    return [BookResponse.model_validate(b) for b in books]


@router.post("/borrow", response_model=CirculationResponse, status_code=status.HTTP_201_CREATED)
async def borrow_book(
    data: TitleRequest,
    username: str = Depends(get_current_username),
    service: CirculationService = Depends(get_circulation_service),
) -> CirculationResponse:
    record = await service.borrow_book(username, data.title)
    return CirculationResponse(
        message=f'You have borrowed "{data.title}".',
        record=InventoryRecordResponse.model_validate(record),
    )


@router.post("/reserve", response_model=CirculationResponse, status_code=status.HTTP_201_CREATED)
async def reserve_book(
    data: TitleRequest,
    username: str = Depends(get_current_username),
    service: CirculationService = Depends(get_circulation_service),
) -> CirculationResponse:
    record = await service.reserve_book(username, data.title)
    return CirculationResponse(
        message=f'You have reserved "{data.title}".',
        record=InventoryRecordResponse.model_validate(record),
    )
