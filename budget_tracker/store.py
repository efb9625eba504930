"""Transaction store: holds and persists expense and income collections.

Each mutation serializes the whole affected collection back to session
storage.  Storage problems never propagate out of the store: reads
degrade to empty collections and writes leave the in-memory state
authoritative, both with a logged warning.
"""

from __future__ import annotations

import json
import logging
from typing import Dict, List, Optional, Tuple

import pandas as pd

from .config import EXPENSES_KEY, INCOMES_KEY
from .exceptions import InvalidTransactionError, StorageUnavailableError
from .models import EXPENSE, INCOME, Expense, Income, Transaction, record_type
from .session_storage import MemoryStorage, SessionStorage

log = logging.getLogger(__name__)

FRAME_COLUMNS = ["id", "kind", "date", "category", "title", "amount"]


class TransactionStore:
    """Owns the expense and income collections for one session."""

    def __init__(
        self,
        storage: Optional[SessionStorage] = None,
        expenses_key: str = EXPENSES_KEY,
        incomes_key: str = INCOMES_KEY,
    ):
        self.storage = storage if storage is not None else MemoryStorage()
        self._keys = {EXPENSE: expenses_key, INCOME: incomes_key}
        self._collections: Dict[str, List[Transaction]] = {EXPENSE: [], INCOME: []}

    @property
    def expenses(self) -> Tuple[Expense, ...]:
        return tuple(self._collections[EXPENSE])

    @property
    def incomes(self) -> Tuple[Income, ...]:
        return tuple(self._collections[INCOME])

    def get(self, kind: str) -> Tuple[Transaction, ...]:
        return tuple(self._collection(kind))

    def __len__(self) -> int:
        return len(self._collections[EXPENSE]) + len(self._collections[INCOME])

    def load(self) -> "TransactionStore":
        """Replace in-memory state with what session storage holds."""
        for kind in (EXPENSE, INCOME):
            self._collections[kind] = self._read(kind)
        log.debug(
            "Loaded %d expenses and %d incomes",
            len(self._collections[EXPENSE]),
            len(self._collections[INCOME]),
        )
        return self

    def add(self, kind: str, record: Transaction) -> Transaction:
        """Append ``record`` to the ``kind`` collection and persist it."""
        collection = self._collection(kind)
        expected = record_type(kind)
        if not isinstance(record, expected):
            raise ValueError(f"Cannot add {type(record).__name__} to the {kind} collection")
        collection.append(record)
        log.debug("Added %s %s", kind, record.id)
        self._write(kind)
        return record

    def remove_at(self, kind: str, index: int) -> Optional[Transaction]:
        """Remove the record at ``index``; out-of-range indices are a no-op."""
        collection = self._collection(kind)
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(collection):
            log.warning("Ignoring removal of %s at index %r (size %d)", kind, index, len(collection))
            return None
        removed = collection.pop(index)
        log.debug("Removed %s %s at index %d", kind, removed.id, index)
        self._write(kind)
        return removed

    def remove(self, kind: str, record_id: str) -> Optional[Transaction]:
        """Remove the record whose id is ``record_id``; unknown ids are a no-op."""
        collection = self._collection(kind)
        for index, record in enumerate(collection):
            if record.id == record_id:
                return self.remove_at(kind, index)
        log.warning("No %s with id %r to remove", kind, record_id)
        return None

    def clear(self) -> None:
        for kind in (EXPENSE, INCOME):
            self._collections[kind] = []
            self._write(kind)

    def to_frame(self) -> pd.DataFrame:
        """Both collections as one DataFrame with a ``kind`` column."""
        return transactions_frame(self._collections[EXPENSE], self._collections[INCOME])

    def _collection(self, kind: str) -> List[Transaction]:
        try:
            return self._collections[kind]
        except KeyError:
            raise ValueError(f"Unknown transaction kind: {kind!r}") from None

    def _read(self, kind: str) -> List[Transaction]:
        key = self._keys[kind]
        try:
            raw = self.storage.get_item(key)
        except StorageUnavailableError as exc:
            log.warning("Could not read %r from session storage: %s", key, exc)
            return []
        if not raw:
            return []
        try:
            payload = json.loads(raw)
        except (TypeError, ValueError) as exc:
            log.warning("Discarding unparsable %r from session storage: %s", key, exc)
            return []
        if not isinstance(payload, list):
            log.warning("Discarding %r from session storage: expected a list, got %s", key, type(payload).__name__)
            return []

        factory = record_type(kind)
        records: List[Transaction] = []
        for position, item in enumerate(payload):
            try:
                records.append(factory.from_dict(item))
            except InvalidTransactionError as exc:
                log.warning("Skipping invalid %s at position %d: %s", kind, position, exc)
        return records

    def _write(self, kind: str) -> None:
        key = self._keys[kind]
        try:
            payload = json.dumps([record.to_dict() for record in self._collections[kind]])
            self.storage.set_item(key, payload)
        except (StorageUnavailableError, TypeError, ValueError) as exc:
            log.warning("Could not persist %r to session storage: %s", key, exc)


def transactions_frame(expenses, incomes) -> pd.DataFrame:
    """Build a DataFrame from expense and income records.

    Incomes get an empty category and title.  Dates are converted to
    pandas timestamps so callers can use the ``.dt`` accessor.
    """
    rows = [
        {
            "id": e.id,
            "kind": EXPENSE,
            "date": e.date,
            "category": e.category,
            "title": e.title,
            "amount": e.amount,
        }
        for e in expenses
    ]
    rows.extend(
        {
            "id": i.id,
            "kind": INCOME,
            "date": i.date,
            "category": "",
            "title": "",
            "amount": i.amount,
        }
        for i in incomes
    )
    frame = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    frame["date"] = pd.to_datetime(frame["date"])
    frame["amount"] = pd.to_numeric(frame["amount"]).astype(float)
    return frame
