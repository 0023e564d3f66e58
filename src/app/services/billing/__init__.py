"""Billing engine exports."""

from .engine import area_report, area_report_totals, monthly_bill, parse_year_month

__all__ = ["monthly_bill", "area_report", "area_report_totals", "parse_year_month"]
