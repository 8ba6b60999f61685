import threading
import uuid
from typing import Dict

from fastapi import Request

class ReceiptNotFound(KeyError):
    """Raised when no score was ever stored under an identifier."""

    def __init__(self, receipt_id: str):
        super().__init__(receipt_id)
        self.receipt_id = receipt_id

class ScoreStore:
    """
    In-memory identifier -> points mapping for the life of the process.
    Every read and write of the dict happens under one lock, so a lookup
    issued after insert() returned always sees the record.
    """

    def __init__(self):
        self._points: Dict[str, int] = {}
        self._lock = threading.Lock()

    def insert(self, points: int) -> str:
        with self._lock:
            receipt_id = str(uuid.uuid4())
            while receipt_id in self._points:
                receipt_id = str(uuid.uuid4())
            self._points[receipt_id] = points
        return receipt_id

    def lookup(self, receipt_id: str) -> int:
        with self._lock:
            try:
                return self._points[receipt_id]
            except KeyError:
                raise ReceiptNotFound(receipt_id) from None

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._points

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)

def get_store(request: Request) -> ScoreStore:
    return request.app.state.store
