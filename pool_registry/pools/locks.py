"""
Reader-writer lock with poisoning for the classification maps.

Any number of readers may hold the lock together; a writer holds it alone.
Waiting writers block new readers so a steady stream of filter calls cannot
starve mutations. A writer that leaves its critical section through an
exception poisons the lock: every later acquisition fails with a
ReadLockPoisonedError or WriteLockPoisonedError until clear_poison() is called.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from .errors import ReadLockPoisonedError, WriteLockPoisonedError

logger = logging.getLogger(__name__)


class RWLock:
    """Poisoning reader-writer lock built on a single condition variable."""

    def __init__(self, name: str = "rwlock"):
        self.name = name
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0
        self._poisoned = False

    @property
    def is_poisoned(self) -> bool:
        with self._cond:
            return self._poisoned

    def clear_poison(self):
        """Mark the lock usable again. The guarded data is left as is."""
        with self._cond:
            if self._poisoned:
                logger.warning(f"Clearing poisoned lock on {self.name}")
            self._poisoned = False

    def acquire_read(self):
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            if self._poisoned:
                raise ReadLockPoisonedError(self.name)
            self._readers += 1

    def release_read(self):
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self, ignore_poison: bool = False):
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._waiting_writers -= 1
            if self._poisoned and not ignore_poison:
                # readers parked behind this writer may proceed (and fail) now
                self._cond.notify_all()
                raise WriteLockPoisonedError(self.name)
            self._writer = True

    def release_write(self, poison: bool = False):
        with self._cond:
            self._writer = False
            if poison:
                self._poisoned = True
            self._cond.notify_all()

    @contextmanager
    def read(self) -> Iterator[None]:
        """Hold the lock in shared mode for the duration of the block."""
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write(self, ignore_poison: bool = False) -> Iterator[None]:
        """
        Hold the lock in exclusive mode for the duration of the block.

        Args:
            ignore_poison: Acquire even if the lock is poisoned. Used by
                recovery paths that rebuild the guarded data.
        """
        self.acquire_write(ignore_poison=ignore_poison)
        try:
            yield
        except BaseException as e:
            logger.error(f"Writer on {self.name} exited abnormally, poisoning lock: {e!r}")
            self.release_write(poison=True)
            raise
        else:
            self.release_write()
