import threading


class RWLock:
    """
    Multiple-readers / single-writer lock.

    Writers are preferred: once a writer is waiting, new readers block until it has
    run. Not reentrant; a thread holding either side must not acquire again.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self):
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self):
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_read() called without a reader")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self):
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self):
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write() called without a writer")
            self._writer = False
            self._cond.notify_all()
