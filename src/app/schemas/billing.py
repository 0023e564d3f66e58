"""Bill and area report API schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel

from ..models.domain import AreaReportRow, Bill
from ..services.billing import area_report_totals
from .customers import CustomerModel, HoldingsModel
from .supplies import SupplyModel


class BillLineModel(BaseModel):
    supply: SupplyModel
    amount: float


class BillResponse(BaseModel):
    customer: CustomerModel
    month: str
    supplies: List[SupplyModel]
    lines: List[BillLineModel]
    total_amount: float
    total_paid: float
    balance: float

    @classmethod
    def from_domain(cls, bill: Bill) -> "BillResponse":
        return cls(
            customer=CustomerModel.from_domain(bill.customer),
            month=f"{bill.year:04d}-{bill.month:02d}",
            supplies=[SupplyModel.from_domain(supply) for supply in bill.supplies],
            lines=[BillLineModel(supply=SupplyModel.from_domain(line.supply), amount=line.amount) for line in bill.lines],
            total_amount=bill.total_amount,
            total_paid=bill.total_paid,
            balance=bill.balance,
        )


class AreaReportRowModel(BaseModel):
    customer: CustomerModel
    holdings: HoldingsModel
    dues: float


class AreaReportResponse(BaseModel):
    area: str
    rows: List[AreaReportRowModel]
    total_holdings: HoldingsModel
    total_dues: float

    @classmethod
    def from_rows(cls, area: str, rows: List[AreaReportRow]) -> "AreaReportResponse":
        holdings, dues = area_report_totals(rows)
        return cls(
            area=area,
            rows=[
                AreaReportRowModel(
                    customer=CustomerModel.from_domain(row.customer),
                    holdings=HoldingsModel(jars=row.holdings.jars, thermos=row.holdings.thermos),
                    dues=row.dues,
                )
                for row in rows
            ],
            total_holdings=HoldingsModel(jars=holdings.jars, thermos=holdings.thermos),
            total_dues=dues,
        )


class ExportResponse(BaseModel):
    run_id: str
    files: List[str]
