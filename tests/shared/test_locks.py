"""Tests for shared/locks.py."""

import threading
import time
import pytest

from shared.locks import ReadWriteLock


class TestReadWriteLock:
    def test_readers_share_the_lock(self):
        """Two readers should hold the lock at the same time."""
        lock = ReadWriteLock()
        both_inside = threading.Barrier(2, timeout=5)

        def reader():
            with lock.read_locked():
                both_inside.wait()

        threads = [threading.Thread(target=reader) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5)

        assert not both_inside.broken

    def test_writer_excludes_readers(self):
        """A reader should wait until the writer releases."""
        lock = ReadWriteLock()
        events = []

        lock.acquire_write()

        def reader():
            with lock.read_locked():
                events.append("read")

        t = threading.Thread(target=reader)
        t.start()
        time.sleep(0.05)
        events.append("write-done")
        lock.release_write()
        t.join(timeout=5)

        assert events == ["write-done", "read"]

    def test_writer_waits_for_readers(self):
        lock = ReadWriteLock()
        events = []

        lock.acquire_read()

        def writer():
            with lock.write_locked():
                events.append("write")

        t = threading.Thread(target=writer)
        t.start()
        time.sleep(0.05)
        events.append("read-done")
        lock.release_read()
        t.join(timeout=5)

        assert events == ["read-done", "write"]

    def test_release_without_acquire_raises(self):
        lock = ReadWriteLock()
        with pytest.raises(RuntimeError):
            lock.release_read()
        with pytest.raises(RuntimeError):
            lock.release_write()

    def test_lock_released_on_exception(self):
        lock = ReadWriteLock()
        with pytest.raises(ValueError):
            with lock.write_locked():
                raise ValueError("boom")

        # Would deadlock if the write lock leaked
        with lock.read_locked():
            pass
