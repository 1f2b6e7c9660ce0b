from pydantic import BaseModel
from typing import Any, Dict, Generic, List, Optional, TypeVar
import threading
import logging

logger = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)

class RecordStore(Generic[R]):
    """Ordered in-memory records keyed by `id`.

    Reads hand out deep copies so a caller never observes a half-applied update.
    Hold `lock` to make a read-then-write sequence atomic.
    """

    def __init__(self, name: str):
        self.name = name
        self.lock = threading.RLock()
        self._records: List[R] = []

    def __len__(self) -> int:
        with self.lock:
            return len(self._records)

    def _index(self, record_id: str) -> int:
        for i, record in enumerate(self._records):
            if record.id == record_id:
                return i
        return -1

    def list(self) -> List[R]:
        with self.lock:
            return [r.model_copy(deep=True) for r in self._records]

    def find(self, record_id: str) -> Optional[R]:
        with self.lock:
            i = self._index(record_id)
            return self._records[i].model_copy(deep=True) if i > -1 else None

    def append(self, record: R) -> R:
        with self.lock:
            if self._index(record.id) > -1:
                raise ValueError(f"Duplicate {self.name} id: {record.id}")
            self._records.append(record.model_copy(deep=True))
        logger.debug("Stored %s %s", self.name, record.id)
        return record

    def update(self, record_id: str, changes: Dict[str, Any]) -> Optional[R]:
        """Overwrite fields of a stored record in place; `id` never changes"""
        changes = {k: v for k, v in changes.items() if k != "id"}
        with self.lock:
            i = self._index(record_id)
            if i == -1:
                return None
            record = self._records[i]
            for name, value in changes.items():
                setattr(record, name, value)
            return record.model_copy(deep=True)

    def remove(self, record_id: str) -> bool:
        with self.lock:
            i = self._index(record_id)
            if i == -1:
                return False
            del self._records[i]
        logger.debug("Removed %s %s", self.name, record_id)
        return True
