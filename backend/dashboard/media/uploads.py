import threading
from contextlib import contextmanager
from typing import Dict, Set


class UploadTracker:
    """
    Pending-upload counters keyed by (owner, field path).

    Each field owns its own slot, so one upload finishing never clears
    another field's pending state. Overlapping uploads for the same field
    each hold the slot until they finish.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._pending: Dict[str, Dict[str, int]] = {}

    def start(self, owner: str, field: str) -> None:
        with self._lock:
            fields = self._pending.setdefault(owner, {})
            fields[field] = fields.get(field, 0) + 1

    def finish(self, owner: str, field: str) -> None:
        with self._lock:
            fields = self._pending.get(owner)
            if not fields or field not in fields:
                return
            fields[field] -= 1
            if fields[field] <= 0:
                del fields[field]
            if not fields:
                del self._pending[owner]

    def is_uploading(self, owner: str, field: str) -> bool:
        with self._lock:
            return self._pending.get(owner, {}).get(field, 0) > 0

    def pending(self, owner: str) -> Set[str]:
        with self._lock:
            return set(self._pending.get(owner, {}))

    @contextmanager
    def track(self, owner: str, field: str):
        self.start(owner, field)
        try:
            yield
        finally:
            self.finish(owner, field)
