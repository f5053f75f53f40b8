"""
Exception classes for the pool classification registry.

Lock poisoning is the only failure the registry itself produces: a writer
left its critical section through an exception, so the guarded map may hold
a partial update. The registry never recovers from this on its own.
"""


class PoolRegistryError(Exception):
    """Base exception for pool registry operations."""
    pass


class LockPoisonedError(PoolRegistryError):
    """Raised when a classification map's lock has been poisoned."""

    mode = "unknown"

    def __init__(self, map_name: str):
        super().__init__(
            f"{self.mode} lock on pool {map_name} is poisoned; "
            f"a previous writer exited abnormally"
        )
        self.map_name = map_name


class ReadLockPoisonedError(LockPoisonedError):
    """Raised when a shared (read) acquisition finds the lock poisoned."""

    mode = "read"


class WriteLockPoisonedError(LockPoisonedError):
    """Raised when an exclusive (write) acquisition finds the lock poisoned."""

    mode = "write"
