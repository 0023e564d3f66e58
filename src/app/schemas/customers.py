"""Customer directory API schemas."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from ..models.domain import Customer, CustomerDraft

RawNumber = Union[float, str, None]


class PreferencesModel(BaseModel):
    jar: bool = False
    thermos: bool = False


class RatesModel(BaseModel):
    jar: float = 0.0
    thermos: float = 0.0


class CustomerInput(BaseModel):
    """Form values for adding or editing a customer; numbers may arrive as text."""

    name: str = ""
    area: str = ""
    mobile: str = ""
    landmark: Optional[str] = None
    security_money: RawNumber = Field(default=None, description="Refundable deposit held for the customer.")
    preferences: PreferencesModel = Field(default_factory=PreferencesModel)
    jar_rate: RawNumber = Field(default=None, description="Price per jar; ignored unless preferences.jar is set.")
    thermos_rate: RawNumber = Field(default=None, description="Price per thermos; ignored unless preferences.thermos is set.")

    def to_draft(self) -> CustomerDraft:
        return CustomerDraft(
            name=self.name,
            area=self.area,
            mobile=self.mobile,
            jar=self.preferences.jar,
            thermos=self.preferences.thermos,
            jar_rate=self.jar_rate,
            thermos_rate=self.thermos_rate,
            landmark=self.landmark,
            security_money=self.security_money,
        )


class CustomerModel(BaseModel):
    id: str
    name: str
    area: str
    mobile: str
    landmark: Optional[str] = None
    security_money: Optional[float] = None
    preferences: PreferencesModel
    rates: RatesModel
    created_at: datetime

    @classmethod
    def from_domain(cls, customer: Customer) -> "CustomerModel":
        return cls(
            id=customer.id,
            name=customer.name,
            area=customer.area,
            mobile=customer.mobile,
            landmark=customer.landmark,
            security_money=customer.security_money,
            preferences=PreferencesModel(jar=customer.preferences.jar, thermos=customer.preferences.thermos),
            rates=RatesModel(jar=customer.rates.jar, thermos=customer.rates.thermos),
            created_at=customer.created_at,
        )


class HoldingsModel(BaseModel):
    jars: int
    thermos: int


class CustomerHoldingsResponse(BaseModel):
    customer_id: str
    holdings: HoldingsModel


class CustomerDuesResponse(BaseModel):
    customer_id: str
    dues: float


class RejectedRowModel(BaseModel):
    row: int
    reason: str


class CustomerImportResponse(BaseModel):
    added: List[CustomerModel]
    rejected: List[RejectedRowModel]
    total_customers: int
