"""Supply ledger API schemas."""

from __future__ import annotations

import datetime as dt
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from ..models.domain import CountsDraft, Supply, SupplyDraft

RawNumber = Union[int, float, str, None]


class CountsInput(BaseModel):
    jars: RawNumber = None
    thermos: RawNumber = None


class SupplyEntryInput(BaseModel):
    delivered: Optional[CountsInput] = None
    returned: Optional[CountsInput] = None
    payment: RawNumber = None

    def to_draft(self) -> SupplyDraft:
        delivered = self.delivered or CountsInput()
        returned = self.returned or CountsInput()
        return SupplyDraft(
            delivered=CountsDraft(jars=delivered.jars, thermos=delivered.thermos),
            returned=CountsDraft(jars=returned.jars, thermos=returned.thermos),
            payment=self.payment,
        )


class SupplyBatchRequest(BaseModel):
    date: dt.date
    entries: Dict[str, SupplyEntryInput] = Field(
        default_factory=dict,
        description="Supply-sheet rows keyed by customer id.",
    )


class QuantitiesModel(BaseModel):
    jars: int
    thermos: int


class SupplyModel(BaseModel):
    id: str
    customer_id: str
    date: dt.date
    delivered: QuantitiesModel
    returned: QuantitiesModel
    payment: float

    @classmethod
    def from_domain(cls, supply: Supply) -> "SupplyModel":
        return cls(
            id=supply.id,
            customer_id=supply.customer_id,
            date=supply.date,
            delivered=QuantitiesModel(jars=supply.delivered.jars, thermos=supply.delivered.thermos),
            returned=QuantitiesModel(jars=supply.returned.jars, thermos=supply.returned.thermos),
            payment=supply.payment,
        )


class SupplyBatchResponse(BaseModel):
    date: dt.date
    recorded: List[SupplyModel]
