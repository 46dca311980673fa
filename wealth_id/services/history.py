from __future__ import annotations

import threading
from collections import deque
from typing import Deque, List

from wealth_id.models.conversion import ConversionRecord

"""Bounded in-memory history of recent conversions.

One instance is owned by each application (``app.state.history``) and handed
to route handlers through a FastAPI dependency. Nothing is persisted; a
process restart starts from an empty history.

The deque's ``maxlen`` evicts the oldest record when a new one arrives at
capacity. A lock makes append-and-evict atomic when the host serves requests
from more than one thread.
"""

DEFAULT_CAPACITY = 10


class ConversionHistory:
    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        if capacity < 1:
            raise ValueError("history capacity must be at least 1")
        self._records: Deque[ConversionRecord] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        return self._records.maxlen  # type: ignore[return-value]

    def append(self, record: ConversionRecord) -> ConversionRecord:
        with self._lock:
            self._records.append(record)
        return record

    def recent(self) -> List[ConversionRecord]:
        """Stored records, most recent first."""
        with self._lock:
            return list(reversed(self._records))

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
