from datetime import datetime, timezone

import pytest

from src.app.models.domain import CustomerDraft
from src.app.services.customers import (
    add_customer,
    customers_in_area,
    draft_from_row,
    find_customer,
    import_customers,
    list_areas,
    remove_customer,
    update_customer,
)
from src.app.services.errors import NotFoundError, ValidationError


def _draft(name: str = "Ravi", area: str = "North", **overrides) -> CustomerDraft:
    values = dict(name=name, area=area, mobile="9800000000", jar=True, jar_rate="50")
    values.update(overrides)
    return CustomerDraft(**values)


def test_add_customer_appends_record_with_unique_id():
    customers, first = add_customer((), _draft("Ravi"))
    updated, second = add_customer(customers, _draft("Meena"))

    assert len(customers) == 1
    assert len(updated) == 2
    assert first.id != second.id
    assert updated[-1] is second
    assert second.created_at.tzinfo is not None


def test_add_customer_does_not_touch_input_collection():
    customers, _ = add_customer((), _draft())
    before = tuple(customers)

    add_customer(customers, _draft("Meena"))

    assert customers == before


def test_add_customer_retries_colliding_ids():
    ids = iter(["dup", "dup", "fresh"])
    customers, _ = add_customer((), _draft(), id_factory=lambda: next(ids))
    _, customer = add_customer(customers, _draft("Meena"), id_factory=lambda: next(ids))

    assert customer.id == "fresh"


@pytest.mark.parametrize("field", ["name", "area", "mobile"])
def test_add_customer_requires_name_area_mobile(field):
    draft = _draft(**{field: "   "})

    with pytest.raises(ValidationError):
        add_customer((), draft)


def test_rates_default_to_zero_when_preference_off_or_unparseable():
    _, customer = add_customer((), _draft(jar=True, jar_rate="abc", thermos=False, thermos_rate="30"))

    assert customer.rates.jar == 0.0
    assert customer.rates.thermos == 0.0


def test_optional_fields_are_parsed():
    _, customer = add_customer((), _draft(landmark=" Near temple ", security_money="500"))

    assert customer.landmark == "Near temple"
    assert customer.security_money == 500.0


def test_update_customer_preserves_id_and_created_at():
    created = datetime(2024, 1, 5, tzinfo=timezone.utc)
    customers, original = add_customer((), _draft(), clock=lambda: created)
    customers, _ = add_customer(customers, _draft("Meena"))

    updated_customers, updated = update_customer(
        customers,
        original.id,
        _draft("Ravi Kumar", area="South", thermos=True, thermos_rate="20"),
    )

    assert updated.id == original.id
    assert updated.created_at == created
    assert updated.name == "Ravi Kumar"
    assert updated.area == "South"
    assert updated.rates.jar == 50.0
    assert updated.rates.thermos == 20.0
    assert updated_customers[0] == updated
    assert len(updated_customers) == len(customers)


def test_update_customer_unknown_id_raises():
    customers, _ = add_customer((), _draft())

    with pytest.raises(NotFoundError):
        update_customer(customers, "missing", _draft())


def test_update_customer_validates_before_lookup():
    customers, customer = add_customer((), _draft())

    with pytest.raises(ValidationError):
        update_customer(customers, customer.id, _draft(mobile=""))


def test_remove_customer_is_idempotent():
    customers, customer = add_customer((), _draft())

    assert remove_customer(customers, "missing") == customers
    assert remove_customer(customers, customer.id) == ()


def test_area_helpers_follow_directory_order():
    customers, _ = add_customer((), _draft("A", area="North"))
    customers, _ = add_customer(customers, _draft("B", area="South"))
    customers, _ = add_customer(customers, _draft("C", area="North"))

    assert list_areas(customers) == ["North", "South"]
    assert [c.name for c in customers_in_area(customers, "North")] == ["A", "C"]
    assert len(customers_in_area(customers, None)) == 3
    assert find_customer(customers, customers[1].id).name == "B"
    assert find_customer(customers, "missing") is None


def test_draft_from_row_maps_headers_and_preferences():
    draft = draft_from_row({"Customer Name": "Ravi", "Area": "North", "Phone": "98", "Jar Rate": "45", "Thermos Rate": ""})

    assert draft.name == "Ravi"
    assert draft.mobile == "98"
    assert draft.jar is True
    assert draft.thermos is False


def test_import_customers_reports_rejected_rows():
    rows = [
        {"name": "Ravi", "area": "North", "mobile": "98", "jar_rate": 40},
        {"name": "", "area": "North", "mobile": "97"},
    ]

    result = import_customers((), rows)

    assert [c.name for c in result.added] == ["Ravi"]
    assert len(result.customers) == 1
    assert result.rejected[0]["row"] == 3


def test_import_customers_skips_blank_rows_but_counts_them():
    rows = [
        {"name": "Ravi", "area": "North", "mobile": "98"},
        {"name": "", "area": None, "mobile": "  "},
        {"name": "", "area": "North", "mobile": "97"},
    ]

    result = import_customers((), rows)

    assert len(result.added) == 1
    assert result.rejected == [{"row": 4, "reason": result.rejected[0]["reason"]}]
