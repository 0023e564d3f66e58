"""Customer directory operations.

Every operation takes the current collection and returns a new tuple; the
input is never modified.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Iterable, Mapping, Optional, Sequence

from ...models.domain import Customer, CustomerDraft, Preferences, Rates
from ..errors import NotFoundError, ValidationError
from ..parsing import parse_non_negative_float, parse_optional_non_negative_float


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


def _clean(value: Optional[str]) -> str:
    return (value or "").strip()


def _validate(draft: CustomerDraft) -> None:
    missing = [label for label, value in (("name", draft.name), ("area", draft.area), ("mobile", draft.mobile)) if not _clean(value)]
    if missing:
        raise ValidationError(f"Please fill in all required fields: {', '.join(missing)}")


def _build(draft: CustomerDraft, customer_id: str, created_at: datetime) -> Customer:
    preferences = Preferences(jar=bool(draft.jar), thermos=bool(draft.thermos))
    rates = Rates(
        jar=parse_non_negative_float(draft.jar_rate) if preferences.jar else 0.0,
        thermos=parse_non_negative_float(draft.thermos_rate) if preferences.thermos else 0.0,
    )
    return Customer(
        id=customer_id,
        name=_clean(draft.name),
        area=_clean(draft.area),
        mobile=_clean(draft.mobile),
        preferences=preferences,
        rates=rates,
        created_at=created_at,
        landmark=_clean(draft.landmark) or None,
        security_money=parse_optional_non_negative_float(draft.security_money),
    )


def add_customer(
    customers: Sequence[Customer],
    draft: CustomerDraft,
    *,
    id_factory: Callable[[], str] = new_id,
    clock: Callable[[], datetime] = utc_now,
) -> tuple[tuple[Customer, ...], Customer]:
    _validate(draft)
    existing = {customer.id for customer in customers}
    customer_id = id_factory()
    while customer_id in existing:
        customer_id = id_factory()
    customer = _build(draft, customer_id, clock())
    logging.info(f"Added customer {customer.id} ({customer.name}, {customer.area})")
    return (*customers, customer), customer


def update_customer(
    customers: Sequence[Customer],
    customer_id: str,
    draft: CustomerDraft,
) -> tuple[tuple[Customer, ...], Customer]:
    _validate(draft)
    for index, current in enumerate(customers):
        if current.id == customer_id:
            updated = _build(draft, current.id, current.created_at)
            result = (*customers[:index], updated, *customers[index + 1:])
            logging.info(f"Updated customer {customer_id}")
            return result, updated
    raise NotFoundError(customer_id)


def remove_customer(customers: Sequence[Customer], customer_id: str) -> tuple[Customer, ...]:
    remaining = tuple(customer for customer in customers if customer.id != customer_id)
    if len(remaining) != len(customers):
        logging.info(f"Removed customer {customer_id}")
    return remaining


def find_customer(customers: Iterable[Customer], customer_id: str) -> Optional[Customer]:
    for customer in customers:
        if customer.id == customer_id:
            return customer
    return None


def list_areas(customers: Iterable[Customer]) -> list[str]:
    """Distinct areas in the order they first appear in the directory."""
    return list(dict.fromkeys(customer.area for customer in customers))


def customers_in_area(customers: Iterable[Customer], area: Optional[str]) -> list[Customer]:
    if not area:
        return list(customers)
    return [customer for customer in customers if customer.area == area]


@dataclass(slots=True)
class ImportResult:
    customers: tuple[Customer, ...]
    added: list[Customer] = field(default_factory=list)
    rejected: list[dict] = field(default_factory=list)


_COLUMN_ALIASES = {
    "name": ["name", "customer_name", "customer", "cusname"],
    "area": ["area", "locality", "route", "zone"],
    "mobile": ["mobile", "phone", "mobile_number", "phone_number", "contact"],
    "landmark": ["landmark", "address"],
    "security_money": ["security_money", "security", "deposit", "security_deposit"],
    "jar_rate": ["jar_rate", "jar", "rate_jar"],
    "thermos_rate": ["thermos_rate", "thermos", "rate_thermos"],
}


def _normalize_header(header: Any) -> str:
    return str(header or "").lower().strip().replace(" ", "_").replace("-", "_")


def draft_from_row(row: Mapping[str, Any]) -> CustomerDraft:
    """Map a spreadsheet row onto a draft; a positive rate switches its preference on."""
    normalized = {_normalize_header(key): value for key, value in row.items()}
    values: dict[str, Any] = {}
    for field_name, aliases in _COLUMN_ALIASES.items():
        for alias in aliases:
            if alias in normalized and normalized[alias] not in (None, ""):
                values[field_name] = normalized[alias]
                break
    jar_rate = values.get("jar_rate")
    thermos_rate = values.get("thermos_rate")
    return CustomerDraft(
        name=str(values.get("name", "")),
        area=str(values.get("area", "")),
        mobile=str(values.get("mobile", "")),
        jar=parse_non_negative_float(jar_rate) > 0,
        thermos=parse_non_negative_float(thermos_rate) > 0,
        jar_rate=jar_rate,
        thermos_rate=thermos_rate,
        landmark=str(values["landmark"]) if "landmark" in values else None,
        security_money=values.get("security_money"),
    )


def _is_blank(row: Mapping[str, Any]) -> bool:
    return all(value is None or not str(value).strip() for value in row.values())


def import_customers(
    customers: Sequence[Customer],
    rows: Iterable[Mapping[str, Any]],
    *,
    id_factory: Callable[[], str] = new_id,
    clock: Callable[[], datetime] = utc_now,
) -> ImportResult:
    """Add one customer per row; ``rows`` follow a header row, so the first is sheet row 2.

    Blank rows are skipped but still counted, keeping rejected row numbers aligned with the sheet.
    """
    result = ImportResult(customers=tuple(customers))
    for line_number, row in enumerate(rows, start=2):
        if _is_blank(row):
            continue
        try:
            result.customers, customer = add_customer(
                result.customers, draft_from_row(row), id_factory=id_factory, clock=clock
            )
        except ValidationError as exc:
            result.rejected.append({"row": line_number, "reason": str(exc)})
            continue
        result.added.append(customer)
    if result.rejected:
        logging.warning(f"Customer import skipped {len(result.rejected)} invalid rows")
    return result
