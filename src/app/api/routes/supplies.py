"""Supply ledger endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query, status

from ...schemas.supplies import SupplyBatchRequest, SupplyBatchResponse, SupplyModel
from ...services.session import BookSession, get_session
from ...services.supplies import supplies_for

router = APIRouter(tags=["supplies"])


@router.get("/supplies", response_model=List[SupplyModel], status_code=status.HTTP_200_OK)
def list_supplies(
    customer_id: str | None = Query(default=None, description="Only supplies for this customer"),
    session: BookSession = Depends(get_session),
) -> List[SupplyModel]:
    supplies = session.supplies if customer_id is None else supplies_for(customer_id, session.supplies)
    return [SupplyModel.from_domain(supply) for supply in supplies]


@router.post("/supplies:batch", response_model=SupplyBatchResponse, status_code=status.HTTP_201_CREATED)
def record_supply_batch(payload: SupplyBatchRequest, session: BookSession = Depends(get_session)) -> SupplyBatchResponse:
    """Save one day's supply sheet; blank or invalid numbers are stored as 0."""
    entries = {customer_id: entry.to_draft() for customer_id, entry in payload.entries.items()}
    recorded = session.record_batch(payload.date, entries)
    return SupplyBatchResponse(date=payload.date, recorded=[SupplyModel.from_domain(supply) for supply in recorded])
