"""Bill and area report serializers."""

from .formatter import area_report_to_csv, area_report_to_json, bill_to_csv, bill_to_json

__all__ = ["bill_to_json", "bill_to_csv", "area_report_to_json", "area_report_to_csv"]
