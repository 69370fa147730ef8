import io
import os
import queue
import threading

import pytest

from wsengine.logfile import LogFile
from wsengine.logsys import Log
from wsengine.threadpool import Task, TaskQueue, ThreadPool


@pytest.fixture
def log(tmp_path):
    log_file = LogFile(tmp_path / "pool.log")
    logger = Log(log_file, stdout=io.StringIO(), stderr=io.StringIO())
    yield logger
    log_file.close()


def test_queue_orders_by_priority_then_fifo(log):
    q = TaskQueue(log=log)
    for priority, task_id in [(1, 10), (5, 11), (3, 12), (5, 13)]:
        q.push(Task(lambda: None, priority, task_id))
    assert len(q) == 4
    assert [q.pop().task_id for _ in range(4)] == [11, 13, 12, 10]
    assert len(q) == 0


def test_queue_full(log):
    q = TaskQueue(max_queue_size=2, log=log)
    q.push(Task(lambda: None))
    q.push(Task(lambda: None))
    with pytest.raises(queue.Full):
        q.push(Task(lambda: None))


def test_queue_pop_timeout(log):
    with pytest.raises(queue.Empty):
        TaskQueue(log=log).pop(timeout=0.01)


def test_queue_close(log):
    q = TaskQueue(log=log)
    q.push(Task(lambda: None, task_id=3))
    q.close()
    assert q.closed is True
    assert q.pop().task_id == 3
    assert q.pop() is None
    with pytest.raises(RuntimeError):
        q.push(Task(lambda: None))


def test_submit_returns_result(log):
    with ThreadPool(2, log) as pool:
        future = pool.submit(lambda: 21 * 2)
        assert future.result(timeout=5) == 42


def test_retries_until_success(log):
    calls = []

    def flaky():
        calls.append(1)
        if len(calls) < 3:
            raise RuntimeError("not yet")
        return "done"

    with ThreadPool(1, log) as pool:
        assert pool.submit(flaky).result(timeout=5) == "done"
    assert len(calls) == 3


def test_gives_up_after_retries(log):
    calls = []

    def broken():
        calls.append(1)
        raise ValueError("always")

    with ThreadPool(1, log) as pool:
        with pytest.raises(ValueError, match="always"):
            pool.submit(broken).result(timeout=5)
    assert len(calls) == 4


def test_shutdown_drains_queue(log):
    gate = threading.Event()
    with ThreadPool(1, log) as pool:
        pool.submit(gate.wait)
        futures = [pool.submit(lambda i=i: i) for i in range(5)]
        gate.set()
    assert [f.result(timeout=0) for f in futures] == list(range(5))
    assert all(not t.is_alive() for t in pool.threads)


def test_submit_after_shutdown(log):
    pool = ThreadPool(1, log)
    pool.shutdown()
    with pytest.raises(RuntimeError):
        pool.submit(lambda: None)


def test_worker_count(log):
    with ThreadPool(3, log) as pool:
        pool.assign_worker_threads(2)
        assert len(pool.threads) == 5


@pytest.mark.parametrize("count", [0, -1])
def test_invalid_thread_count(log, count):
    with pytest.raises(ValueError, match="Thread count must be greater than 0"):
        ThreadPool(count, log)


def test_warns_when_exceeding_hardware(log):
    log.set_log_level(6)
    with ThreadPool((os.cpu_count() or 1) + 1, log):
        pass
    assert "Thread count exceeds hardware concurrency" in log._err().getvalue()