import threading


class IdSequence:
    """
    Process-wide identifier source shared by every collection.

    Owns its own lock and never touches the store lock, so it can be called from
    inside a write transaction.
    """

    def __init__(self, start: int = 1):
        if start < 1:
            raise ValueError("Sequence must start at a positive value")
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def peek(self) -> int:
        with self._lock:
            return self._next
