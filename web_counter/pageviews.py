import threading

INT64_MAX = 2**63 - 1
INT64_MIN = -(2**63)


class PageViews:
    """Page view count that is safe to share between request threads."""

    def __init__(self):
        self._lock = threading.Lock()
        self._count = 0

    def add(self) -> None:
        with self._lock:
            if self._count == INT64_MAX:
                self._count = INT64_MIN
            else:
                self._count += 1

    def count(self) -> int:
        with self._lock:
            return self._count
