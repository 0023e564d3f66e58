"""Utilities to serialize bills and area reports into JSON/CSV artifacts."""

from __future__ import annotations

import csv
import io

from ...config import settings
from ...schemas.billing import AreaReportResponse, BillResponse


def bill_to_json(response: BillResponse) -> dict:
    return response.model_dump(mode="json")


def bill_to_csv(response: BillResponse) -> str:
    buffer = io.StringIO()
    currency = settings.currency_symbol
    writer = csv.writer(buffer)
    writer.writerow(["date", "jars", "thermos", f"amount ({currency})", f"paid ({currency})"])
    for line in response.lines:
        writer.writerow(
            [
                line.supply.date.strftime("%d/%m/%Y"),
                line.supply.delivered.jars,
                line.supply.delivered.thermos,
                line.amount,
                line.supply.payment,
            ]
        )
    writer.writerow(["total", "", "", response.total_amount, response.total_paid])
    writer.writerow(["balance", "", "", response.balance, ""])
    return buffer.getvalue()


def area_report_to_json(response: AreaReportResponse) -> dict:
    return response.model_dump(mode="json")


def area_report_to_csv(response: AreaReportResponse) -> str:
    buffer = io.StringIO()
    fieldnames = ["customer_id", "name", "mobile", "landmark", "jars_held", "thermos_held", f"dues ({settings.currency_symbol})"]
    writer = csv.DictWriter(buffer, fieldnames=fieldnames)
    writer.writeheader()
    for row in response.rows:
        writer.writerow(
            {
                "customer_id": row.customer.id,
                "name": row.customer.name,
                "mobile": row.customer.mobile,
                "landmark": row.customer.landmark or "",
                "jars_held": row.holdings.jars,
                "thermos_held": row.holdings.thermos,
                fieldnames[-1]: row.dues,
            }
        )
    return buffer.getvalue()
