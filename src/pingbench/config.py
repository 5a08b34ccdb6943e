from __future__ import annotations

import argparse
from dataclasses import dataclass


@dataclass(frozen=True)
class RunConfig:
    host: str = "127.0.0.1"
    port: int = 6379
    total_requests: int = 0
    clients: int = 0

    def is_runnable(self) -> bool:
        return self.total_requests > 0 and self.clients > 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pingbench",
        description="RESP PING load generator",
    )
    parser.add_argument("--host", default="127.0.0.1", help="Redis server host")
    parser.add_argument("--port", type=int, default=6379, help="Redis server port")
    parser.add_argument(
        "--total-requests",
        type=int,
        default=0,
        help="Total number of commands to send (required)",
    )
    parser.add_argument(
        "--clients",
        type=int,
        default=0,
        help="Number of concurrent clients (required)",
    )
    return parser


def parse_args(argv=None, parser: argparse.ArgumentParser | None = None) -> RunConfig:
    parser = parser or build_parser()
    args = parser.parse_args(argv)
    return RunConfig(
        host=args.host,
        port=args.port,
        total_requests=args.total_requests,
        clients=args.clients,
    )
