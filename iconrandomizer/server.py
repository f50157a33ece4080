"""IconRandomizer - status server that rotates the server icon on every ping."""

import argparse
import logging
import socket
import threading
from pathlib import Path

from iconrandomizer.config import (
    DATA_DIR,
    LOG_LEVEL,
    MAX_PLAYERS,
    PREFERRED_PORT,
    PROTOCOL_VERSION,
    SERVER_HOST,
    SERVER_MOTD,
    SERVER_PORT_AUTO_FALLBACK,
    VERSION_NAME,
    find_available_port,
)
from iconrandomizer.core import state
from iconrandomizer.core.plugin import IconRandomizer
from iconrandomizer.core.protocol import parse_json_message, send_json_message, split_messages
from iconrandomizer.core.status import StatusReply
from iconrandomizer.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_base_reply():
    """Status reply before the plugin gets to pick an icon."""
    with state.counters_lock:
        online = state.connections
    return StatusReply(
        description=SERVER_MOTD,
        version_name=VERSION_NAME,
        protocol=PROTOCOL_VERSION,
        online_players=online,
        max_players=MAX_PLAYERS,
    )


def handle_json_message(client_socket, plugin, msg_obj):
    """Answer one parsed message from a client.

    STATUS runs the reply through the plugin's ping hook, PING is echoed
    back as PONG, anything else gets an ERROR.

    Returns:
        False if the reply could not be sent and the connection should close
    """
    msg_type = msg_obj.get("type", "")
    data = msg_obj.get("data")
    if not isinstance(data, dict):
        data = {}

    if msg_type == "STATUS":
        reply = plugin.on_ping(build_base_reply())
        state.status_served()
        return send_json_message(client_socket, "STATUS", reply.to_payload())

    if msg_type == "PING":
        return send_json_message(client_socket, "PONG", {"payload": data.get("payload")})

    return send_json_message(client_socket, "ERROR", {"text": "unknown message type"})


def handle_client(client_socket, address, plugin):
    """Serve one client connection until it disconnects.

    Args:
        client_socket: Socket of the new client connection
        address: Tuple (host, port) of the connecting client
        plugin: IconRandomizer answering status queries
    """
    state.connection_opened()
    logger.debug("Connection from %s", address)
    try:
        buffer = ""
        while True:
            data = client_socket.recv(4096)
            if not data:
                break
            buffer += data.decode(errors="replace")

            messages, buffer = split_messages(buffer)
            for message in messages:
                parsed = parse_json_message(message)
                if parsed is None:
                    logger.warning("Dropping non-JSON message from %s: %s", address, message[:80])
                    continue
                if not handle_json_message(client_socket, plugin, parsed):
                    return
    except OSError as exc:
        logger.debug("Connection from %s closed: %s", address, exc)
    finally:
        state.connection_closed()
        client_socket.close()


def create_server_socket(host, port):
    """Bind and listen on ``host:port``. Returns (socket, bound port)."""
    server_socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    server_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    server_socket.bind((host, port))
    server_socket.listen()
    return server_socket, server_socket.getsockname()[1]


def serve_forever(server_socket, plugin, stop_event=None):
    """Accept connections and hand each one to its own daemon thread.

    Returns when ``stop_event`` is set or the listening socket is closed.
    """
    while stop_event is None or not stop_event.is_set():
        try:
            client_socket, address = server_socket.accept()
        except OSError:
            break
        threading.Thread(
            target=handle_client,
            args=(client_socket, address, plugin),
            daemon=True,
        ).start()


def server_thread(plugin, host=SERVER_HOST, preferred_port=PREFERRED_PORT,
                  allow_fallback=SERVER_PORT_AUTO_FALLBACK, stop_event=None):
    """Find a port, listen on it and serve status queries.

    Returns:
        False if no port was available, True once serving stops
    """
    port = find_available_port(preferred_port, allow_fallback=allow_fallback, host=host)
    if port is None:
        logger.error("Could not find available port starting from %s", preferred_port)
        return False

    server_socket, state.SERVER_PORT = create_server_socket(host, port)
    logger.info("Server listening on %s:%s", host, state.SERVER_PORT)
    try:
        serve_forever(server_socket, plugin, stop_event)
    finally:
        server_socket.close()
    return True


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Serve a random server icon on every status ping.")
    parser.add_argument("--host", default=SERVER_HOST,
                        help=f"Address to bind (default {SERVER_HOST}).")
    parser.add_argument("--port", type=int, default=PREFERRED_PORT,
                        help=f"Preferred TCP port (default {PREFERRED_PORT}).")
    parser.add_argument("--data-dir", type=Path, default=Path(DATA_DIR),
                        help=f"Plugin data directory (default {DATA_DIR}).")
    parser.add_argument("--nogui", action="store_true",
                        help="Run without the admin console.")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    setup_logging(LOG_LEVEL)

    plugin = IconRandomizer(args.data_dir)
    plugin.on_initialize()

    if args.nogui:
        try:
            server_thread(plugin, args.host, args.port)
        except KeyboardInterrupt:
            logger.info("Shutting down.")
        return

    # Imported here so --nogui works on machines without Tk
    from iconrandomizer.console import run_console

    threading.Thread(
        target=server_thread,
        args=(plugin, args.host, args.port),
        daemon=True,
    ).start()
    run_console(plugin, args.host)


if __name__ == "__main__":
    main()
