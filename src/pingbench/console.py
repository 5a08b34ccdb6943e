import sys
import threading

_lock = threading.Lock()


def say(message: str) -> None:
    # one write per message, workers share stdout
    with _lock:
        sys.stdout.write(message + "\n")
        sys.stdout.flush()
