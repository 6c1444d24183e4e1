from __future__ import annotations

import sys
from contextlib import contextmanager
from time import perf_counter
from typing import Iterator, Optional


def log_info(worker: str, message: str) -> None:
    print(f"[{worker}] {message}", file=sys.stderr)


def log_summary(worker: str, *, matched: int, total: int, found: Optional[bool] = None) -> None:
    parts = [f"matched={matched}", f"total={total}"]
    if found is not None:
        parts.append(f"found={int(found)}")
    log_info(worker, "result: " + " ".join(parts))


@contextmanager
def worker_session(worker: str, *, handle: Optional[str] = None) -> Iterator[None]:
    start = perf_counter()
    handle_note = f" (handle={handle})" if handle is not None else ""
    log_info(worker, f"start{handle_note}")
    try:
        yield
    finally:
        elapsed = perf_counter() - start
        log_info(worker, f"finished in {elapsed:.2f}s")


__all__ = ["log_info", "log_summary", "worker_session"]
