"""In-memory receipt store."""

import threading
from typing import Protocol

from app.errors import DuplicateReceiptError
from app.models import Receipt


class ReceiptStore(Protocol):
    """Protocol for receipt storage backends."""

    def put(self, receipt_id: str, receipt: Receipt) -> None: ...

    def get(self, receipt_id: str) -> Receipt | None: ...

    def iterate(self) -> list[Receipt]: ...


class InMemoryReceiptStore:
    """Process-lifetime mapping of receipt id to Receipt.

    Writers are serialized by a lock. Lookups read the dict directly, and
    iteration copies the values under the lock so a concurrent insert cannot
    break it.
    """

    def __init__(self) -> None:
        self._receipts: dict[str, Receipt] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, receipt: Receipt) -> None:
        with self._lock:
            if receipt_id in self._receipts:
                raise DuplicateReceiptError(f"Receipt {receipt_id} already exists")
            self._receipts[receipt_id] = receipt

    def get(self, receipt_id: str) -> Receipt | None:
        return self._receipts.get(receipt_id)

    def iterate(self) -> list[Receipt]:
        with self._lock:
            return list(self._receipts.values())

    def __len__(self) -> int:
        return len(self._receipts)
