"""Customer service helpers."""

from .directory import (
    ImportResult,
    add_customer,
    customers_in_area,
    draft_from_row,
    find_customer,
    import_customers,
    list_areas,
    remove_customer,
    update_customer,
)

__all__ = [
    "ImportResult",
    "add_customer",
    "update_customer",
    "remove_customer",
    "find_customer",
    "list_areas",
    "customers_in_area",
    "draft_from_row",
    "import_customers",
]
