from . import state
from .icons import Icon, decode_icon, load_icons
from .paths import resolve_path, resolve_server_root
from .plugin import IconRandomizer
from .protocol import parse_json_message, send_json_message
from .registry import IconRegistry
from .status import StatusReply

__all__ = [
    "state",
    "Icon",
    "decode_icon",
    "load_icons",
    "resolve_path",
    "resolve_server_root",
    "IconRandomizer",
    "parse_json_message",
    "send_json_message",
    "IconRegistry",
    "StatusReply",
]
