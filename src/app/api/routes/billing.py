"""Monthly bill and area report endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...schemas.billing import AreaReportResponse, BillResponse, ExportResponse
from ...services.billing import area_report, monthly_bill
from ...services.errors import ValidationError
from ...services.reports import export_area_report, export_bill
from ...services.session import BookSession, get_session

router = APIRouter(tags=["billing"])


def _build_bill(customer_id: str, month: str, session: BookSession) -> BillResponse:
    snapshot = session.snapshot()
    try:
        bill = monthly_bill(customer_id, month, snapshot.customers, snapshot.supplies)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_CONTENT, detail=str(exc)) from exc
    if bill is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Customer '{customer_id}' not found")
    return BillResponse.from_domain(bill)


def _build_area_report(area: str, session: BookSession) -> AreaReportResponse:
    snapshot = session.snapshot()
    return AreaReportResponse.from_rows(area, area_report(area, snapshot.customers, snapshot.supplies))


@router.get("/bills/{customer_id}", response_model=BillResponse, status_code=status.HTTP_200_OK)
def get_monthly_bill(
    customer_id: str,
    month: str = Query(..., description="Billing month as YYYY-MM"),
    session: BookSession = Depends(get_session),
) -> BillResponse:
    return _build_bill(customer_id, month, session)


@router.post("/bills/{customer_id}/export", response_model=ExportResponse, status_code=status.HTTP_201_CREATED)
def export_monthly_bill(
    customer_id: str,
    month: str = Query(..., description="Billing month as YYYY-MM"),
    session: BookSession = Depends(get_session),
) -> ExportResponse:
    run_dir = export_bill(_build_bill(customer_id, month, session))
    return ExportResponse(run_id=run_dir.name, files=sorted(path.name for path in run_dir.iterdir()))


@router.get("/areas/{area}/report", response_model=AreaReportResponse, status_code=status.HTTP_200_OK)
def get_area_report(area: str, session: BookSession = Depends(get_session)) -> AreaReportResponse:
    return _build_area_report(area, session)


@router.post("/areas/{area}/report/export", response_model=ExportResponse, status_code=status.HTTP_201_CREATED)
def export_area_due_report(area: str, session: BookSession = Depends(get_session)) -> ExportResponse:
    run_dir = export_area_report(_build_area_report(area, session))
    return ExportResponse(run_id=run_dir.name, files=sorted(path.name for path in run_dir.iterdir()))
