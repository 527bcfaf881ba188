import logging
import threading
from typing import Dict, List, Optional

from fastapi import Request

from string_analyzer.exceptions import Conflict, NotFound
from string_analyzer.schemas import StringResponse

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------------------
# IN-MEMORY STORE
# ------------------------------------------------------------------------------
class StringStore:
    """
    Process-lifetime mapping of sha256 id -> analyzed record.

    Every read and write of the mapping happens under one lock, so a
    duplicate insert or a double delete can never interleave.
    """

    def __init__(self):
        self._records: Dict[str, StringResponse] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def add(self, record: StringResponse) -> StringResponse:
        """Insert a record unless one with the same id exists"""
        with self._lock:
            if record.id in self._records:
                raise Conflict()
            self._records[record.id] = record
        return record

    def get(self, record_id: str) -> Optional[StringResponse]:
        with self._lock:
            return self._records.get(record_id)

    def remove(self, record_id: str) -> StringResponse:
        """Delete and return the record, or raise NotFound"""
        with self._lock:
            record = self._records.pop(record_id, None)
        if record is None:
            raise NotFound()
        return record

    def all(self) -> List[StringResponse]:
        """Snapshot of every record in insertion order"""
        with self._lock:
            return list(self._records.values())

    def clear(self) -> None:
        with self._lock:
            self._records.clear()


# ------------------------------------------------------------------------------
# STORE DEPENDENCY
# ------------------------------------------------------------------------------
def get_store(request: Request) -> StringStore:
    """Dependency to provide the application's store."""
    return request.app.state.store


def init_store() -> StringStore:
    """Create the empty store (runs once on startup)."""
    store = StringStore()
    logger.info("In-memory string store initialized")
    return store
