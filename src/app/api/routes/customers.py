"""Customer directory endpoints."""

from __future__ import annotations

import csv
from io import BytesIO
from pathlib import Path
from typing import List
from zipfile import BadZipFile

from fastapi import APIRouter, Depends, File, HTTPException, Query, Response, UploadFile, status
from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from ...schemas.customers import (
    CustomerDuesResponse,
    CustomerHoldingsResponse,
    CustomerImportResponse,
    CustomerInput,
    CustomerModel,
    HoldingsModel,
    RejectedRowModel,
)
from ...services.customers import customers_in_area, find_customer, list_areas
from ...services.errors import NotFoundError, ValidationError
from ...services.session import BookSession, get_session
from ...services.supplies import dues_for, holdings_for

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=List[CustomerModel], status_code=status.HTTP_200_OK)
def list_customers(
    area: str | None = Query(default=None, description="Optional area filter"),
    session: BookSession = Depends(get_session),
) -> List[CustomerModel]:
    return [CustomerModel.from_domain(customer) for customer in customers_in_area(session.customers, area)]


@router.get("/areas", response_model=List[str], status_code=status.HTTP_200_OK)
def get_areas(session: BookSession = Depends(get_session)) -> List[str]:
    return list_areas(session.customers)


@router.post("", response_model=CustomerModel, status_code=status.HTTP_201_CREATED)
def create_customer(payload: CustomerInput, session: BookSession = Depends(get_session)) -> CustomerModel:
    try:
        customer = session.add_customer(payload.to_draft())
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_CONTENT, detail=str(exc)) from exc
    return CustomerModel.from_domain(customer)


@router.post("/import", response_model=CustomerImportResponse, status_code=status.HTTP_201_CREATED)
async def import_customer_file(
    file: UploadFile = File(...),
    session: BookSession = Depends(get_session),
) -> CustomerImportResponse:
    """Bulk-add customers from a CSV or Excel sheet with a header row."""
    if not file.filename:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Filename is required.")

    suffix = Path(file.filename).suffix.lower()
    if suffix not in {".csv", ".xlsx"}:
        raise HTTPException(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail="Only .csv and .xlsx files are supported.")

    contents = await file.read()
    if suffix == ".csv":
        try:
            text = contents.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="CSV file must be UTF-8 encoded.") from exc
        reader = csv.reader(text.splitlines())
        headers = next(reader, [])
        # blank lines stay as empty rows so rejected row numbers match the sheet
        rows = [dict(zip(headers, values)) for values in reader]
    else:
        try:
            workbook = load_workbook(filename=BytesIO(contents), read_only=True, data_only=True)
            worksheet = workbook.active
            row_iter = worksheet.iter_rows(values_only=True)
            headers = [str(cell) if cell is not None else "" for cell in next(row_iter, [])]
            rows = [
                {headers[i]: ("" if cell is None else cell) for i, cell in enumerate(row_values) if i < len(headers)}
                for row_values in row_iter
            ]
            workbook.close()
        except (BadZipFile, InvalidFileException, KeyError) as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="File is not a readable .xlsx workbook.") from exc

    result = session.import_customers(rows)
    return CustomerImportResponse(
        added=[CustomerModel.from_domain(customer) for customer in result.added],
        rejected=[RejectedRowModel(**item) for item in result.rejected],
        total_customers=len(result.customers),
    )


@router.get("/{customer_id}", response_model=CustomerModel, status_code=status.HTTP_200_OK)
def get_customer(customer_id: str, session: BookSession = Depends(get_session)) -> CustomerModel:
    customer = find_customer(session.customers, customer_id)
    if customer is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Customer '{customer_id}' not found")
    return CustomerModel.from_domain(customer)


@router.put("/{customer_id}", response_model=CustomerModel, status_code=status.HTTP_200_OK)
def update_customer(
    customer_id: str,
    payload: CustomerInput,
    session: BookSession = Depends(get_session),
) -> CustomerModel:
    try:
        customer = session.update_customer(customer_id, payload.to_draft())
    except NotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_CONTENT, detail=str(exc)) from exc
    return CustomerModel.from_domain(customer)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(customer_id: str, session: BookSession = Depends(get_session)) -> Response:
    session.remove_customer(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{customer_id}/holdings", response_model=CustomerHoldingsResponse, status_code=status.HTTP_200_OK)
def get_customer_holdings(customer_id: str, session: BookSession = Depends(get_session)) -> CustomerHoldingsResponse:
    holdings = holdings_for(customer_id, session.supplies)
    return CustomerHoldingsResponse(
        customer_id=customer_id,
        holdings=HoldingsModel(jars=holdings.jars, thermos=holdings.thermos),
    )


@router.get("/{customer_id}/dues", response_model=CustomerDuesResponse, status_code=status.HTTP_200_OK)
def get_customer_dues(customer_id: str, session: BookSession = Depends(get_session)) -> CustomerDuesResponse:
    snapshot = session.snapshot()
    return CustomerDuesResponse(customer_id=customer_id, dues=dues_for(customer_id, snapshot.customers, snapshot.supplies))
