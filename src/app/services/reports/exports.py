"""Persist bills and area reports as export runs on disk."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from ...persistence.filesystem import FileStorage
from ...schemas.billing import AreaReportResponse, BillResponse
from ..outputs.formatter import area_report_to_csv, area_report_to_json, bill_to_csv, bill_to_json


def _slug(value: str) -> str:
    return re.sub(r"[^A-Za-z0-9]+", "-", value).strip("-").lower() or "unnamed"


def export_bill(response: BillResponse) -> Path:
    storage = FileStorage()
    run_dir = storage.make_run_directory(prefix=f"bill_{_slug(response.customer.name)}_{response.month}")
    storage.write_json(run_dir / "summary.json", bill_to_json(response))
    storage.write_csv(run_dir / "bill.csv", bill_to_csv(response))
    logging.info(f"Exported bill for customer {response.customer.id} ({response.month}) to {run_dir}")
    return run_dir


def export_area_report(response: AreaReportResponse) -> Path:
    storage = FileStorage()
    run_dir = storage.make_run_directory(prefix=f"area_{_slug(response.area)}")
    storage.write_json(run_dir / "summary.json", area_report_to_json(response))
    storage.write_csv(run_dir / "report.csv", area_report_to_csv(response))
    logging.info(f"Exported area report for '{response.area}' to {run_dir}")
    return run_dir
