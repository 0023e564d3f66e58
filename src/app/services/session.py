"""The single owner of the customer directory and supply ledger.

Writers are serialised with a lock; each write computes new collections with
the pure directory/ledger functions, saves them, and only then swaps them in.
Readers get both collections as one consistent snapshot.
"""

from __future__ import annotations

import functools
import logging
import threading
from datetime import date
from typing import Any, Iterable, Mapping

from ..config import settings
from ..models.domain import Customer, CustomerDraft, Supply, SupplyDraft
from ..persistence.store import JsonFileStore, MemoryStore, StorageBackend, StoreSnapshot
from .customers import directory
from .supplies import ledger


class BookSession:
    def __init__(self, storage: StorageBackend) -> None:
        self._storage = storage
        self._lock = threading.Lock()
        loaded = storage.load()
        self._customers: tuple[Customer, ...] = loaded.customers
        self._supplies: tuple[Supply, ...] = loaded.supplies

    def snapshot(self) -> StoreSnapshot:
        with self._lock:
            return StoreSnapshot(customers=self._customers, supplies=self._supplies)

    @property
    def customers(self) -> tuple[Customer, ...]:
        return self.snapshot().customers

    @property
    def supplies(self) -> tuple[Supply, ...]:
        return self.snapshot().supplies

    def _commit(self, customers: tuple[Customer, ...], supplies: tuple[Supply, ...]) -> None:
        self._storage.save(customers, supplies)
        self._customers = customers
        self._supplies = supplies

    def add_customer(self, draft: CustomerDraft) -> Customer:
        with self._lock:
            customers, customer = directory.add_customer(self._customers, draft)
            self._commit(customers, self._supplies)
            return customer

    def update_customer(self, customer_id: str, draft: CustomerDraft) -> Customer:
        with self._lock:
            customers, customer = directory.update_customer(self._customers, customer_id, draft)
            self._commit(customers, self._supplies)
            return customer

    def remove_customer(self, customer_id: str) -> None:
        with self._lock:
            customers = directory.remove_customer(self._customers, customer_id)
            if len(customers) != len(self._customers):
                self._commit(customers, self._supplies)

    def import_customers(self, rows: Iterable[Mapping[str, Any]]) -> directory.ImportResult:
        with self._lock:
            result = directory.import_customers(self._customers, rows)
            if result.added:
                self._commit(result.customers, self._supplies)
            return result

    def record_batch(self, supply_date: date, entries: Mapping[str, SupplyDraft]) -> tuple[Supply, ...]:
        with self._lock:
            known = {customer.id for customer in self._customers}
            orphans = [customer_id for customer_id in entries if customer_id not in known]
            if orphans:
                logging.warning(f"Recording supplies for unknown customers: {', '.join(orphans)}")
            supplies, recorded = ledger.record_batch(self._supplies, supply_date, entries)
            self._commit(self._customers, supplies)
            return recorded


def build_storage() -> StorageBackend:
    if settings.storage_backend == "memory":
        return MemoryStore()
    return JsonFileStore(settings.store_file)


@functools.lru_cache(maxsize=1)
def get_session() -> BookSession:
    """Process-wide session, created on first use."""
    return BookSession(build_storage())
