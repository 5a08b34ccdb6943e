from __future__ import annotations

LINE_TERMINATOR = b"\n"


def encode_command(*parts: str | bytes) -> bytes:
    """Encode a command as a RESP2 array of bulk strings."""
    out = [b"*%d\r\n" % len(parts)]
    for p in parts:
        if isinstance(p, str):
            p = p.encode()
        out.append(b"$%d\r\n%s\r\n" % (len(p), p))
    return b"".join(out)


# *1\r\n$4\r\nPING\r\n
PING_PROBE = encode_command("PING")
