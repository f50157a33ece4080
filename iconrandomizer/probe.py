"""Status probe for an IconRandomizer server.

Connects, asks for the server status, measures a PING round trip and
prints what a server list would show.
"""

import argparse
import hashlib
import socket
import time

from iconrandomizer.core.protocol import encode_json_message, parse_json_message, split_messages


def _read_message(sock, buffer):
    """Block until one complete message arrives. Returns (message, remaining buffer)."""
    while True:
        messages, rest = split_messages(buffer)
        if messages:
            # Re-attach anything after the first message for the next read
            remaining = "\n".join(messages[1:])
            return parse_json_message(messages[0]), (remaining + "\n" if remaining else "") + rest
        data = sock.recv(65536)
        if not data:
            raise ConnectionError("server closed the connection")
        buffer += data.decode(errors="replace")


def query_status(host, port, timeout=2.0):
    """Fetch the status payload and ping latency from a server.

    Returns:
        Tuple of (status payload dict, latency in milliseconds)

    Raises:
        OSError: connection failures or timeouts
        ConnectionError: the server closed the connection early
    """
    with socket.create_connection((host, port), timeout=timeout) as sock:
        buffer = ""
        sock.sendall(encode_json_message("STATUS", {}))
        reply, buffer = _read_message(sock, buffer)
        status = (reply or {}).get("data", {})

        sent_at = time.monotonic()
        sock.sendall(encode_json_message("PING", {"payload": int(sent_at * 1000)}))
        _read_message(sock, buffer)
        latency_ms = (time.monotonic() - sent_at) * 1000

    return status, latency_ms


def favicon_digest(favicon):
    """Short SHA-1 of a favicon data URI, handy for telling icons apart."""
    return hashlib.sha1(favicon.encode("ascii")).hexdigest()[:10]


def describe_status(status, latency_ms):
    players = status.get("players", {})
    description = status.get("description", {})
    if isinstance(description, dict):
        description = description.get("text", "")
    favicon = status.get("favicon")
    icon_text = f"icon {favicon_digest(favicon)}" if favicon else "default icon"
    return (
        f"{description} | {players.get('online', 0)}/{players.get('max', 0)} players"
        f" | {icon_text} | {latency_ms:.1f} ms"
    )


def main(argv=None):
    parser = argparse.ArgumentParser(description="Query an IconRandomizer status server.")
    parser.add_argument("host", help="Server host name or IP address.")
    parser.add_argument("port", type=int, help="Server TCP port.")
    parser.add_argument("--count", type=int, default=1, help="Number of queries to send.")
    args = parser.parse_args(argv)

    for _ in range(args.count):
        try:
            status, latency_ms = query_status(args.host, args.port)
        except OSError as exc:
            print(f"Could not query {args.host}:{args.port}: {exc}")
            return 1
        print(describe_status(status, latency_ms))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
