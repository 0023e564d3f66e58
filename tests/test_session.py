from datetime import date
from pathlib import Path

import pytest

from src.app.models.domain import CountsDraft, CustomerDraft, SupplyDraft
from src.app.persistence.store import JsonFileStore, MemoryStore
from src.app.services.errors import ValidationError
from src.app.services.session import BookSession


def _draft(name: str = "Ravi", area: str = "North") -> CustomerDraft:
    return CustomerDraft(name=name, area=area, mobile="98", jar=True, jar_rate="50")


class FailingStore(MemoryStore):
    def save(self, customers, supplies) -> None:
        raise OSError("disk full")


def test_session_persists_every_write(tmp_path: Path):
    path = tmp_path / "store.json"
    session = BookSession(JsonFileStore(path))

    customer = session.add_customer(_draft())
    session.record_batch(date(2024, 5, 1), {customer.id: SupplyDraft(delivered=CountsDraft(jars="4"))})

    reloaded = BookSession(JsonFileStore(path))
    assert reloaded.customers == session.customers
    assert reloaded.supplies[0].delivered.jars == 4


def test_failed_validation_leaves_state_untouched():
    store = MemoryStore()
    session = BookSession(store)
    session.add_customer(_draft())

    with pytest.raises(ValidationError):
        session.add_customer(CustomerDraft(name="", area="North", mobile="1"))

    assert len(session.customers) == 1
    assert len(store.load().customers) == 1


def test_failed_save_keeps_previous_collections():
    session = BookSession(FailingStore())

    with pytest.raises(OSError):
        session.add_customer(_draft())

    assert session.customers == ()


def test_remove_and_update_through_session():
    session = BookSession(MemoryStore())
    first = session.add_customer(_draft("A"))
    second = session.add_customer(_draft("B"))

    session.update_customer(second.id, _draft("B2", area="South"))
    session.remove_customer(first.id)
    session.remove_customer("missing")

    assert [c.name for c in session.customers] == ["B2"]


def test_import_customers_through_session():
    store = MemoryStore()
    session = BookSession(store)

    result = session.import_customers([{"name": "Ravi", "area": "North", "mobile": "98"}])

    assert len(result.added) == 1
    assert store.load().customers == session.customers
