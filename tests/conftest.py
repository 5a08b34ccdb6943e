import socket
import threading

import pytest


def _pick_free_port() -> int:
    s = socket.socket()
    s.bind(("127.0.0.1", 0))
    port = s.getsockname()[1]
    s.close()
    return port


class PingServer:
    """Answers one reply line per received PING probe."""

    def __init__(self, reply=b"+PONG\r\n", close_after=None):
        self.reply = reply
        self.close_after = close_after
        self.received = 0
        self.connections = 0
        self._lock = threading.Lock()
        self._sock = socket.socket()
        self._sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        self._sock.bind(("127.0.0.1", 0))
        self._sock.listen(128)
        self.port = self._sock.getsockname()[1]
        self._sock.settimeout(0.05)
        self._stop = threading.Event()
        self._th = threading.Thread(target=self._accept_loop, daemon=True)

    def start(self):
        self._th.start()
        return self

    def stop(self):
        self._stop.set()
        self._th.join(timeout=2.0)
        self._sock.close()
        assert not self._th.is_alive(), "server thread did not stop in time"

    def _accept_loop(self):
        while not self._stop.is_set():
            try:
                conn, _ = self._sock.accept()
            except socket.timeout:
                continue
            except OSError:
                return
            conn.settimeout(None)
            with self._lock:
                self.connections += 1
            threading.Thread(target=self._handle, args=(conn,), daemon=True).start()

    def _handle(self, conn):
        buf = b""
        with conn:
            while True:
                try:
                    data = conn.recv(4096)
                except OSError:
                    return
                if not data:
                    return
                buf += data
                # a probe is three CRLF lines
                while buf.count(b"\r\n") >= 3:
                    _, _, _, buf = buf.split(b"\r\n", 3)
                    with self._lock:
                        self.received += 1
                        n = self.received
                    if self.close_after is not None and n > self.close_after:
                        return
                    conn.sendall(self.reply)


@pytest.fixture
def make_ping_server():
    started = []

    def factory(**kwargs):
        srv = PingServer(**kwargs).start()
        started.append(srv)
        return srv

    yield factory
    for srv in started:
        srv.stop()


@pytest.fixture
def ping_server(make_ping_server):
    return make_ping_server()


@pytest.fixture
def free_port():
    return _pick_free_port()
