"""Export service exports."""

from .exports import export_area_report, export_bill

__all__ = ["export_bill", "export_area_report"]
