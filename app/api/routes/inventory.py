"""Per-user inventory and the admin borrowed-books overview."""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_circulation_service
from app.api.middleware.session import get_current_username
from app.api.schemas import BorrowedByResponse, InventoryRecordResponse
from app.services.circulation import CirculationService

router = APIRouter(tags=["Inventory"])


@router.get("/inventory", response_model=list[InventoryRecordResponse])
async def my_inventory(
    username: str = Depends(get_current_username),
    service: CirculationService = Depends(get_circulation_service),
) -> list[InventoryRecordResponse]:
    """Borrow and reserve history of the current user, oldest first."""
    records = await service.inventory_for(username)
    return [InventoryRecordResponse.model_validate(r) for r in records]


@router.get("/admin/borrowed", response_model=list[BorrowedByResponse])
async def all_borrowed(
    service: CirculationService = Depends(get_circulation_service),
) -> list[BorrowedByResponse]:
    borrowed = await service.borrowed_books()
    return [
        BorrowedByResponse(
            username=item.username,
            record=InventoryRecordResponse.model_validate(item.record),
        )
        for item in borrowed
    ]
