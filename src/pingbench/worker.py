from __future__ import annotations

import socket

from .console import say
from .resp import LINE_TERMINATOR, PING_PROBE


def run_worker(host: str, port: int, n: int, connect=socket.create_connection) -> int:
    """
    Send ``n`` PING probes over one connection, one at a time.

    Each probe is written in full, then the reply is read up to the next
    newline and dropped. Any I/O error is printed and ends the worker.
    Returns how many round trips completed.
    """
    if n <= 0:
        return 0

    addr = f"{host}:{port}"
    try:
        conn = connect((host, port))
    except (OSError, UnicodeError) as e:
        say(f"Error connecting to {addr}: {e}")
        return 0

    done = 0
    with conn, conn.makefile("rb") as reader:
        for _ in range(n):
            try:
                conn.sendall(PING_PROBE)
            except OSError as e:
                say(f"Write error: {e}")
                break
            try:
                line = reader.readline()
                if not line.endswith(LINE_TERMINATOR):
                    raise ConnectionError("connection closed before end of line")
            except OSError as e:
                say(f"Read error: {e}")
                break
            done += 1
    return done
