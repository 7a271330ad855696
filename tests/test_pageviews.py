import threading
from concurrent.futures import ThreadPoolExecutor

from web_counter.pageviews import INT64_MAX, INT64_MIN, PageViews


def test_fresh_counter_is_zero():
    assert PageViews().count() == 0


def test_ten_threads_hundred_adds_each():
    pv = PageViews()

    def worker():
        for _ in range(100):
            pv.add()

    threads = [threading.Thread(target=worker) for _ in range(10)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert pv.count() == 1000


def test_no_lost_updates_under_contention():
    pv = PageViews()
    clients, iters = 50, 2_000
    barrier = threading.Barrier(clients)

    def worker():
        barrier.wait()
        for _ in range(iters):
            pv.add()

    with ThreadPoolExecutor(max_workers=clients) as ex:
        for f in [ex.submit(worker) for _ in range(clients)]:
            f.result()
    assert pv.count() == clients * iters


def test_sequential_adds_are_visible():
    pv = PageViews()
    a = threading.Thread(target=pv.add)
    a.start(); a.join()
    b = threading.Thread(target=pv.add)
    b.start(); b.join()
    assert pv.count() == 2


def test_reads_are_stable_without_adds():
    pv = PageViews()
    for _ in range(7):
        pv.add()
    assert pv.count() == pv.count() == 7


def test_count_never_decreases_while_adding():
    pv = PageViews()
    stop = threading.Event()
    seen = []

    def reader():
        while not stop.is_set():
            seen.append(pv.count())

    r = threading.Thread(target=reader)
    r.start()
    with ThreadPoolExecutor(max_workers=4) as ex:
        list(ex.map(lambda _: [pv.add() for _ in range(1000)], range(4)))
    stop.set()
    r.join()
    assert seen == sorted(seen)
    assert pv.count() == 4000


def test_wraps_at_int64_max():
    pv = PageViews()
    pv._count = INT64_MAX
    pv.add()
    assert pv.count() == INT64_MIN
    pv.add()
    assert pv.count() == INT64_MIN + 1
