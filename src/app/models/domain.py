"""Domain models for customers, supplies and the figures derived from them."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional, Union

RawNumber = Union[str, int, float, None]


@dataclass(slots=True, frozen=True)
class Preferences:
    jar: bool = False
    thermos: bool = False


@dataclass(slots=True, frozen=True)
class Rates:
    jar: float = 0.0
    thermos: float = 0.0


@dataclass(slots=True, frozen=True)
class Customer:
    """A delivery customer and the prices agreed with them."""

    id: str
    name: str
    area: str
    mobile: str
    preferences: Preferences
    rates: Rates
    created_at: datetime
    landmark: Optional[str] = None
    security_money: Optional[float] = None


@dataclass(slots=True, frozen=True)
class Quantities:
    jars: int = 0
    thermos: int = 0


@dataclass(slots=True, frozen=True)
class Supply:
    """One day's delivery, return and payment for a customer."""

    id: str
    customer_id: str
    date: date
    delivered: Quantities
    returned: Quantities
    payment: float = 0.0


@dataclass(slots=True, frozen=True)
class Holdings:
    """Units currently sitting with a customer."""

    jars: int = 0
    thermos: int = 0


@dataclass(slots=True, frozen=True)
class BillLine:
    supply: Supply
    amount: float


@dataclass(slots=True, frozen=True)
class Bill:
    """Month-scoped view of one customer's supplies."""

    customer: Customer
    year: int
    month: int
    supplies: tuple[Supply, ...]
    lines: tuple[BillLine, ...]
    total_amount: float
    total_paid: float
    balance: float


@dataclass(slots=True, frozen=True)
class AreaReportRow:
    customer: Customer
    holdings: Holdings
    dues: float


@dataclass(slots=True)
class CustomerDraft:
    """Customer fields as typed into the add/edit form, before validation."""

    name: str = ""
    area: str = ""
    mobile: str = ""
    jar: bool = False
    thermos: bool = False
    jar_rate: RawNumber = None
    thermos_rate: RawNumber = None
    landmark: Optional[str] = None
    security_money: RawNumber = None


@dataclass(slots=True)
class CountsDraft:
    jars: RawNumber = None
    thermos: RawNumber = None


@dataclass(slots=True)
class SupplyDraft:
    """Partial supply-sheet row for one customer, defaulted when the batch is saved."""

    delivered: CountsDraft = field(default_factory=CountsDraft)
    returned: CountsDraft = field(default_factory=CountsDraft)
    payment: RawNumber = None
