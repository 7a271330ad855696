import argparse
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor

import requests
from requests.adapters import HTTPAdapter

from web_counter.pageviews import PageViews

URL = "http://127.0.0.1:8080"


class Progress:
    def __init__(self, expected: int, every: int):
        self.expected = expected
        self.every = every
        self.done = 0
        self.lock = threading.Lock()

    def tick(self):
        if self.every <= 0:
            return
        to_print = None
        with self.lock:
            self.done += 1
            if self.done % self.every == 0 or self.done == self.expected:
                to_print = self.done
        if to_print is not None:
            print(f"[progress] done={to_print}/{self.expected}", flush=True)


def make_session(clients: int):
    s = requests.Session()
    adapter = HTTPAdapter(pool_connections=clients, pool_maxsize=clients, max_retries=0)
    s.mount("http://", adapter)
    s.mount("https://", adapter)
    s.headers.update({"Connection": "keep-alive"})
    return s


def get_count(base: str, timeout: float) -> int:
    r = requests.get(f"{base}/count", timeout=timeout)
    r.raise_for_status()
    return int(r.text.strip())


def run_http(base: str, threads: int, iters: int, progress: Progress, timeout: float):
    """Hit `/inc` from `threads` clients and return (before, after, seconds)."""

    def worker():
        s = make_session(threads)
        for _ in range(iters):
            r = s.get(f"{base}/inc", timeout=timeout)
            r.raise_for_status()
            progress.tick()

    before = get_count(base, timeout)
    t0 = time.perf_counter()
    with ThreadPoolExecutor(max_workers=threads) as ex:
        futures = [ex.submit(worker) for _ in range(threads)]
        for f in futures:
            f.result()
    dt = time.perf_counter() - t0
    return before, get_count(base, timeout), dt


def run_local(threads: int, iters: int, progress: Progress, counter: PageViews | None = None):
    """Call `add()` on one PageViews from `threads` threads and return (before, after, seconds)."""
    counter = counter or PageViews()
    barrier = threading.Barrier(threads)

    def worker():
        barrier.wait()
        for _ in range(iters):
            counter.add()
            progress.tick()

    before = counter.count()
    t0 = time.perf_counter()
    with ThreadPoolExecutor(max_workers=threads) as ex:
        futures = [ex.submit(worker) for _ in range(threads)]
        for f in futures:
            f.result()
    dt = time.perf_counter() - t0
    return before, counter.count(), dt


def bench(mode: str, threads: int, iters: int, url: str = URL,
          progress_every: int = 0, timeout: float = 10.0) -> bool:
    total = threads * iters
    print(f"[start] mode={mode} threads={threads} iters={iters} expected={total}", flush=True)
    progress = Progress(total, progress_every)

    if mode == "http":
        before, after, dt = run_http(url, threads, iters, progress, timeout)
    elif mode == "local":
        before, after, dt = run_local(threads, iters, progress)
    else:
        raise ValueError("mode must be one of: http, local")

    expected = before + total
    ok = after == expected
    rps = total / dt if dt > 0 else float("inf")
    print(f"[done] time_sec={dt:.6f} rps={rps:.2f}", flush=True)
    print(f"count_before={before} count_after={after} expected={expected} ok={ok}", flush=True)
    return ok


def main(argv=None):
    p = argparse.ArgumentParser()
    p.add_argument("--mode", default="http", choices=["http", "local"])
    p.add_argument("--url", default=URL)
    p.add_argument("--threads", type=int, default=10)
    p.add_argument("--iters", type=int, default=10_000)
    p.add_argument("--progress-every", type=int, default=0)
    p.add_argument("--timeout", type=float, default=10.0)
    args = p.parse_args(argv)

    ok = bench(
        mode=args.mode,
        threads=args.threads,
        iters=args.iters,
        url=args.url.rstrip("/"),
        progress_every=args.progress_every,
        timeout=args.timeout,
    )
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
