"""Storage backends for the customer directory and supply ledger."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, Sequence

from ..models.domain import Customer, Supply
from .records import customer_from_record, customer_to_record, supply_from_record, supply_to_record


@dataclass(slots=True, frozen=True)
class StoreSnapshot:
    customers: tuple[Customer, ...] = ()
    supplies: tuple[Supply, ...] = ()


class StorageBackend(Protocol):
    def load(self) -> StoreSnapshot: ...

    def save(self, customers: Sequence[Customer], supplies: Sequence[Supply]) -> None: ...


class MemoryStore:
    """Keeps the last saved collections in process memory."""

    def __init__(self, snapshot: StoreSnapshot | None = None) -> None:
        self._snapshot = snapshot or StoreSnapshot()

    def load(self) -> StoreSnapshot:
        return self._snapshot

    def save(self, customers: Sequence[Customer], supplies: Sequence[Supply]) -> None:
        self._snapshot = StoreSnapshot(customers=tuple(customers), supplies=tuple(supplies))


class JsonFileStore:
    """Persists both collections to a single JSON document."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> StoreSnapshot:
        if not self.path.exists():
            logging.info(f"No store found at {self.path}; starting with empty collections")
            return StoreSnapshot()
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Store file '{self.path}' is not valid JSON") from exc
        if not isinstance(payload, dict):
            raise ValueError(f"Store file '{self.path}' must hold a JSON object")

        customers = tuple(customer_from_record(item) for item in payload.get("customers") or [])
        supplies = tuple(supply_from_record(item) for item in payload.get("supplies") or [])
        logging.info(f"Loaded {len(customers)} customers and {len(supplies)} supplies from {self.path}")
        return StoreSnapshot(customers=customers, supplies=supplies)

    def save(self, customers: Sequence[Customer], supplies: Sequence[Supply]) -> None:
        payload = {
            "customers": [customer_to_record(customer) for customer in customers],
            "supplies": [supply_to_record(supply) for supply in supplies],
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with temp_path.open("w", encoding="utf-8") as handle:
            json.dump(payload, handle, ensure_ascii=False, indent=2)
        os.replace(temp_path, self.path)
        logging.debug(f"Saved {len(customers)} customers and {len(supplies)} supplies to {self.path}")
