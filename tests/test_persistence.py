from datetime import date, datetime, timezone
from pathlib import Path

import pytest

from src.app.models.domain import Customer, Preferences, Quantities, Rates, Supply
from src.app.persistence.filesystem import FileStorage
from src.app.persistence.store import JsonFileStore, MemoryStore


def _customer() -> Customer:
    return Customer(
        id="C1",
        name="Ravi",
        area="North",
        mobile="98",
        preferences=Preferences(jar=True, thermos=True),
        rates=Rates(jar=50.0, thermos=20.0),
        created_at=datetime(2024, 1, 1, 9, 30, tzinfo=timezone.utc),
        landmark="Temple",
        security_money=500.0,
    )


def _supply() -> Supply:
    return Supply(
        id="S1",
        customer_id="C1",
        date=date(2024, 5, 3),
        delivered=Quantities(jars=10, thermos=2),
        returned=Quantities(jars=3),
        payment=250.0,
    )


def test_file_storage_creates_run_directory(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    run_dir = storage.make_run_directory(prefix="bill_test")

    assert run_dir.exists()
    assert run_dir.is_dir()
    assert run_dir.parent == tmp_path / "outputs"


def test_file_storage_never_reuses_run_directory(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)

    first = storage.make_run_directory(prefix="area_north")
    second = storage.make_run_directory(prefix="area_north")

    assert first != second


def test_file_storage_writes_json_and_csv(tmp_path: Path) -> None:
    storage = FileStorage(root=tmp_path)
    run_dir = storage.make_run_directory(prefix="bill_test")

    summary_path = run_dir / "summary.json"
    bill_path = run_dir / "bill.csv"

    storage.write_json(summary_path, {"hello": "world"})
    storage.write_csv(bill_path, "a,b\n1,2\n")

    assert summary_path.read_text(encoding="utf-8") == '{\n  "hello": "world"\n}'
    assert bill_path.read_text(encoding="utf-8") == "a,b\n1,2\n"


def test_json_store_missing_file_loads_empty(tmp_path: Path) -> None:
    snapshot = JsonFileStore(tmp_path / "store.json").load()

    assert snapshot.customers == ()
    assert snapshot.supplies == ()


def test_json_store_saves_and_reloads(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "store.json"
    JsonFileStore(path).save([_customer()], [_supply()])

    snapshot = JsonFileStore(path).load()

    assert snapshot.customers == (_customer(),)
    assert snapshot.supplies == (_supply(),)
    assert not path.with_suffix(".json.tmp").exists()


def test_json_store_rejects_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ValueError):
        JsonFileStore(path).load()


def test_memory_store_keeps_last_save() -> None:
    store = MemoryStore()
    store.save([_customer()], [])

    assert store.load().customers == (_customer(),)


def test_json_store_rejects_non_object_payload(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_text("[]", encoding="utf-8")

    with pytest.raises(ValueError):
        JsonFileStore(path).load()
