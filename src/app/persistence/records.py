"""Conversion between domain records and the JSON store layout."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from ..models.domain import Customer, Preferences, Quantities, Rates, Supply


def customer_to_record(customer: Customer) -> dict[str, Any]:
    return {
        "id": customer.id,
        "name": customer.name,
        "area": customer.area,
        "mobile": customer.mobile,
        "landmark": customer.landmark,
        "securityMoney": customer.security_money,
        "preferences": {"jar": customer.preferences.jar, "thermos": customer.preferences.thermos},
        "rates": {"jar": customer.rates.jar, "thermos": customer.rates.thermos},
        "createdAt": customer.created_at.isoformat(),
    }


def customer_from_record(record: dict[str, Any]) -> Customer:
    preferences = record.get("preferences") or {}
    rates = record.get("rates") or {}
    return Customer(
        id=str(record["id"]),
        name=record["name"],
        area=record["area"],
        mobile=record["mobile"],
        landmark=record.get("landmark"),
        security_money=record.get("securityMoney"),
        preferences=Preferences(jar=bool(preferences.get("jar")), thermos=bool(preferences.get("thermos"))),
        rates=Rates(jar=float(rates.get("jar") or 0), thermos=float(rates.get("thermos") or 0)),
        created_at=datetime.fromisoformat(record["createdAt"]),
    )


def supply_to_record(supply: Supply) -> dict[str, Any]:
    return {
        "id": supply.id,
        "customerId": supply.customer_id,
        "date": supply.date.isoformat(),
        "delivered": {"jars": supply.delivered.jars, "thermos": supply.delivered.thermos},
        "returned": {"jars": supply.returned.jars, "thermos": supply.returned.thermos},
        "payment": supply.payment,
    }


def _quantities(value: dict[str, Any] | None) -> Quantities:
    value = value or {}
    return Quantities(jars=int(value.get("jars") or 0), thermos=int(value.get("thermos") or 0))


def supply_from_record(record: dict[str, Any]) -> Supply:
    return Supply(
        id=str(record["id"]),
        customer_id=str(record["customerId"]),
        date=date.fromisoformat(record["date"]),
        delivered=_quantities(record.get("delivered")),
        returned=_quantities(record.get("returned")),
        payment=float(record.get("payment") or 0),
    )
