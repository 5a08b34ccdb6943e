from __future__ import annotations

import threading
import time
from dataclasses import dataclass

from .config import RunConfig
from .worker import run_worker


@dataclass(frozen=True)
class RunResult:
    total_requests: int
    clients: int
    elapsed: float

    @property
    def throughput(self) -> float:
        # configured total, not what actually completed
        if self.elapsed <= 0:
            return float("inf")
        return self.total_requests / self.elapsed


def partition(total: int, clients: int) -> list[int]:
    """Split ``total`` into ``clients`` shares that differ by at most one."""
    if clients <= 0:
        raise ValueError("clients must be positive")
    if total < 0:
        raise ValueError("total must not be negative")
    per_client, extra = divmod(total, clients)
    return [per_client + 1 if i < extra else per_client for i in range(clients)]


def run(config: RunConfig, clock=time.perf_counter, worker=run_worker) -> RunResult | None:
    if not config.is_runnable():
        return None

    shares = partition(config.total_requests, config.clients)
    threads = [
        threading.Thread(target=worker, args=(config.host, config.port, n), daemon=True)
        for n in shares
    ]

    t0 = clock()
    for t in threads: t.start()
    for t in threads: t.join()
    elapsed = clock() - t0

    return RunResult(config.total_requests, config.clients, elapsed)
