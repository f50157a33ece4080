"""Network protocol utilities for the IconRandomizer status server.

Messages are newline-delimited JSON objects of the form
``{"type": ..., "data": {...}}`` in both directions.
"""

import json
import logging

logger = logging.getLogger(__name__)


def encode_json_message(msg_type, data):
    payload = {"type": msg_type, "data": data}
    return (json.dumps(payload) + "\n").encode()


def send_json_message(sock, msg_type, data):
    """Send a JSON-encoded message to a client.

    Args:
        sock: Socket of the destination client
        msg_type: Message type/command identifier
        data: Dictionary of message data to be JSON-encoded

    Returns:
        True if the message was written, False on socket errors
    """
    try:
        sock.sendall(encode_json_message(msg_type, data))
        return True
    except OSError as exc:
        logger.debug("Could not send %s message: %s", msg_type, exc)
        return False


def parse_json_message(raw_string):
    """Parse an incoming JSON message.

    Args:
        raw_string: Raw message string to parse

    Returns:
        Parsed dictionary if it is a JSON object, None otherwise
    """
    try:
        parsed = json.loads(raw_string)
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


def split_messages(buffer):
    """Split complete lines off ``buffer``.

    Returns:
        Tuple of (list of non-empty stripped messages, remaining partial buffer)
    """
    messages = []
    while "\n" in buffer:
        message, buffer = buffer.split("\n", 1)
        message = message.strip()
        if message:
            messages.append(message)
    return messages, buffer
