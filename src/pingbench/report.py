from .dispatcher import RunResult


def format_report(result: RunResult) -> str:
    return "\n".join([
        f"Total requests : {result.total_requests}",
        f"Total clients  : {result.clients}",
        f"Elapsed time   : {result.elapsed:.3f} s",
        f"Throughput     : {result.throughput:.0f} ops/sec",
    ])
