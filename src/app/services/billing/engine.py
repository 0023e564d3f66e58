"""Monthly bills and area due reports."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional, Sequence, Union

from ...models.domain import AreaReportRow, Bill, BillLine, Customer, Holdings, Supply
from ..customers.directory import find_customer
from ..errors import ValidationError
from ..supplies.ledger import dues_for, holdings_for, line_amount

YearMonth = Union[str, tuple[int, int]]


def parse_year_month(value: YearMonth) -> tuple[int, int]:
    """Accept ``"YYYY-MM"`` text or a ``(year, month)`` pair."""
    if isinstance(value, tuple):
        try:
            year, month = (int(part) for part in value)
        except (TypeError, ValueError) as exc:
            raise ValidationError(f"Month must be a (year, month) pair, got {value!r}") from exc
        if not 1 <= month <= 12:
            raise ValidationError(f"Invalid month: {month}")
        return year, month
    try:
        parsed = datetime.strptime(str(value).strip(), "%Y-%m")
    except ValueError as exc:
        raise ValidationError(f"Month must be formatted as YYYY-MM, got '{value}'") from exc
    return parsed.year, parsed.month


def monthly_bill(
    customer_id: str,
    year_month: YearMonth,
    customers: Iterable[Customer],
    supplies: Iterable[Supply],
) -> Optional[Bill]:
    customer = find_customer(customers, customer_id)
    if customer is None:
        return None
    year, month = parse_year_month(year_month)

    month_supplies = tuple(
        supply
        for supply in supplies
        if supply.customer_id == customer_id and supply.date.year == year and supply.date.month == month
    )
    lines = tuple(BillLine(supply=supply, amount=line_amount(supply, customer)) for supply in month_supplies)
    total_amount = sum((line.amount for line in lines), 0.0)
    total_paid = sum((supply.payment for supply in month_supplies), 0.0)
    return Bill(
        customer=customer,
        year=year,
        month=month,
        supplies=month_supplies,
        lines=lines,
        total_amount=total_amount,
        total_paid=total_paid,
        balance=total_amount - total_paid,
    )


def area_report(area: str, customers: Sequence[Customer], supplies: Sequence[Supply]) -> list[AreaReportRow]:
    """Lifetime holdings and dues for every customer in ``area``, in directory order."""
    return [
        AreaReportRow(
            customer=customer,
            holdings=holdings_for(customer.id, supplies),
            dues=dues_for(customer.id, customers, supplies),
        )
        for customer in customers
        if customer.area == area
    ]


def area_report_totals(rows: Iterable[AreaReportRow]) -> tuple[Holdings, float]:
    jars = 0
    thermos = 0
    dues = 0.0
    for row in rows:
        jars += row.holdings.jars
        thermos += row.holdings.thermos
        dues += row.dues
    return Holdings(jars=jars, thermos=thermos), dues
