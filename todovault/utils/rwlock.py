"""Reader/writer lock for in-process shared state.

Any number of readers may hold the lock together; a writer holds it alone.
Waiting writers block new readers, so a steady stream of reads cannot
starve a mutation.

    lock = ReadWriteLock()
    with lock.read_locked():
        ...  # shared access
    with lock.write_locked():
        ...  # exclusive access
"""

import threading
from contextlib import contextmanager


class ReadWriteLock:
    """Writer-preferring shared/exclusive lock built on a Condition."""

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._waiting_writers = 0

    def acquire_read(self) -> None:
        with self._cond:
            while self._writer or self._waiting_writers:
                self._cond.wait()
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_read() called without a held read lock")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self) -> None:
        with self._cond:
            self._waiting_writers += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            except BaseException:
                # Readers parked behind this writer must re-check
                self._waiting_writers -= 1
                self._cond.notify_all()
                raise
            self._waiting_writers -= 1
            self._writer = True

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write() called without a held write lock")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self):
        self.acquire_read()
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self):
        self.acquire_write()
        try:
            yield
        finally:
            self.release_write()
