"""
Identifier allocation for renderer resources.

Textures and other GPU-side objects are addressed by integer handles. The
allocator below is an explicitly owned object: each renderer (or test) creates
its own instance and passes it to whatever needs fresh identifiers.
"""

import threading

from telluris.errors import require

NULL_ID = 0


class IdAllocator:
    """Thread-safe, monotonically increasing identifier source.

    ``NULL_ID`` (0) is reserved for unallocated handles, so the first
    identifier handed out is 1 by default.

    Example:
        >>> ids = IdAllocator()
        >>> ids.next_id(), ids.next_id()
        (1, 2)
    """

    def __init__(self, start: int = NULL_ID + 1):
        require(start > NULL_ID, f"start must be greater than {NULL_ID}, got {start}")
        self._next = start
        self._lock = threading.Lock()

    def next_id(self) -> int:
        """Return a fresh identifier."""
        with self._lock:
            value = self._next
            self._next += 1
        return value

    def peek(self) -> int:
        """Return the identifier the next call to ``next_id`` will produce."""
        with self._lock:
            return self._next

    def __repr__(self) -> str:
        return f"IdAllocator(next={self.peek()})"
