from __future__ import annotations

"""
Unit tests for the readers-writer lock.

Verifies:
1. Readers share the lock.
2. A writer waits for active readers and excludes new ones.
"""

import threading
import time

from thelogger.core.rwlock import ReadWriteLock


def test_readers_hold_the_lock_together():
    lock = ReadWriteLock()
    inside = threading.Barrier(3, timeout=5)
    errors = []

    def reader():
        with lock.read():
            try:
                inside.wait()
            except threading.BrokenBarrierError as e:
                errors.append(e)

    threads = [threading.Thread(target=reader) for _ in range(3)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert not errors


def test_writer_waits_for_reader():
    lock = ReadWriteLock()
    events = []
    reader_in = threading.Event()

    def reader():
        with lock.read():
            reader_in.set()
            time.sleep(0.1)
            events.append("reader-out")

    def writer():
        reader_in.wait(timeout=5)
        with lock.write():
            events.append("writer-in")

    threads = [threading.Thread(target=reader), threading.Thread(target=writer)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=5)

    assert events == ["reader-out", "writer-in"]


def test_waiting_writer_blocks_new_readers():
    lock = ReadWriteLock()
    events = []
    first_reader_in = threading.Event()

    def first_reader():
        with lock.read():
            first_reader_in.set()
            time.sleep(0.2)

    def writer():
        with lock.write():
            events.append("writer")

    def late_reader():
        with lock.read():
            events.append("late-reader")

    t1 = threading.Thread(target=first_reader)
    t1.start()
    first_reader_in.wait(timeout=5)

    t2 = threading.Thread(target=writer)
    t2.start()
    time.sleep(0.05)
    t3 = threading.Thread(target=late_reader)
    t3.start()

    for t in (t1, t2, t3):
        t.join(timeout=5)

    assert events == ["writer", "late-reader"]


def test_lock_is_released_on_exception():
    lock = ReadWriteLock()
    try:
        with lock.write():
            raise RuntimeError("boom")
    except RuntimeError:
        pass

    with lock.read():
        pass
    with lock.write():
        pass
