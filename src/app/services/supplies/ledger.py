"""Supply ledger: batch recording plus holdings and dues queries."""

from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Callable, Iterable, Mapping, Sequence

from ...models.domain import CountsDraft, Customer, Holdings, Quantities, Supply, SupplyDraft
from ..customers.directory import find_customer
from ..parsing import parse_non_negative_float, parse_non_negative_int


def _counts(draft: CountsDraft | None) -> Quantities:
    if draft is None:
        return Quantities()
    return Quantities(jars=parse_non_negative_int(draft.jars), thermos=parse_non_negative_int(draft.thermos))


def record_batch(
    supplies: Sequence[Supply],
    supply_date: date,
    entries: Mapping[str, SupplyDraft],
    *,
    id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
) -> tuple[tuple[Supply, ...], tuple[Supply, ...]]:
    """Stamp every draft with ``supply_date`` and append them in entry order.

    Customer ids are not checked against the directory.
    """
    recorded = tuple(
        Supply(
            id=id_factory(),
            customer_id=customer_id,
            date=supply_date,
            delivered=_counts(draft.delivered),
            returned=_counts(draft.returned),
            payment=parse_non_negative_float(draft.payment),
        )
        for customer_id, draft in entries.items()
    )
    logging.info(f"Recorded {len(recorded)} supplies for {supply_date.isoformat()}")
    return (*supplies, *recorded), recorded


def supplies_for(customer_id: str, supplies: Iterable[Supply]) -> list[Supply]:
    return [supply for supply in supplies if supply.customer_id == customer_id]


def holdings_for(customer_id: str, supplies: Iterable[Supply]) -> Holdings:
    jars = 0
    thermos = 0
    for supply in supplies_for(customer_id, supplies):
        jars += supply.delivered.jars - supply.returned.jars
        thermos += supply.delivered.thermos - supply.returned.thermos
    return Holdings(jars=jars, thermos=thermos)


def line_amount(supply: Supply, customer: Customer) -> float:
    """Billable amount of one supply; returns and payment do not reduce it."""
    return supply.delivered.jars * customer.rates.jar + supply.delivered.thermos * customer.rates.thermos


def dues_for(customer_id: str, customers: Iterable[Customer], supplies: Iterable[Supply]) -> float:
    # Unknown customers have no rates, so they owe nothing.
    customer = find_customer(customers, customer_id)
    if customer is None:
        return 0.0
    return sum(
        (line_amount(supply, customer) - supply.payment for supply in supplies_for(customer_id, supplies)),
        0.0,
    )
