from .config import RunConfig
from .dispatcher import RunResult, partition, run
from .resp import PING_PROBE
from .worker import run_worker

__all__ = ["RunConfig", "RunResult", "partition", "run", "run_worker", "PING_PROBE"]
