"""Sequential integer identifiers for records created by the server itself."""

import itertools
import threading


class IdentifierAllocator:
    """Hand out strictly increasing integers starting at ``start``.

    Clients always choose their own identifiers on create; the allocator
    only numbers the records the server seeds at startup.
    """

    def __init__(self, start: int = 0) -> None:
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return next(self._counter)
