# fitstore/core/store.py
"""
Write serialization for the shared store.

Every mutation is a read-modify-write: read current state, check
invariants (email uniqueness), write. Those steps must not interleave
between requests, so all writers pass through one `WriteGate`.
"""
import asyncio
import weakref
from contextlib import asynccontextmanager


def normalize_email(email: str | None) -> str:
    """Emails are compared and stored trimmed and lower-cased."""
    return (email or "").strip().lower()


class WriteGate:
    """
    Process-wide mutual exclusion for check-then-write sequences.

    One asyncio.Lock per running event loop; a lock bound to one loop
    cannot be awaited from another.
    """

    def __init__(self):
        self._locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, asyncio.Lock]" = (
            weakref.WeakKeyDictionary()
        )

    def _lock(self) -> asyncio.Lock:
        loop = asyncio.get_running_loop()
        lock = self._locks.get(loop)
        if lock is None:
            lock = self._locks[loop] = asyncio.Lock()
        return lock

    @asynccontextmanager
    async def exclusive(self):
        async with self._lock():
            yield


write_gate = WriteGate()
