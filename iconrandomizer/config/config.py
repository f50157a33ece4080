"""Host configuration for IconRandomizer.

Loads environment variables for the status server bind address, port,
plugin data directory and the values advertised in each status reply.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# Server connection configuration
SERVER_HOST = os.environ.get("SERVER_HOST", "0.0.0.0")
PREFERRED_PORT = int(os.environ.get("SERVER_PORT", 25577))
SERVER_PORT_AUTO_FALLBACK = os.environ.get(
    "SERVER_PORT_AUTO_FALLBACK", "true").lower() == "true"

# Plugin private data directory (config.properties lives here)
DATA_DIR = os.environ.get("DATA_DIR", os.path.join("plugins", "iconrandomizer"))

# Values advertised in every status reply
SERVER_MOTD = os.environ.get("SERVER_MOTD", "A Minecraft Proxy")
MAX_PLAYERS = int(os.environ.get("MAX_PLAYERS", 500))
VERSION_NAME = os.environ.get("VERSION_NAME", "IconRandomizer")
PROTOCOL_VERSION = int(os.environ.get("PROTOCOL_VERSION", -1))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Admin console theme colors
BACKGROUND_COLOR = "#0E1020"
ACCENT_COLOR = "#4E8AFF"
HOVER_COLOR = "#3357A0"
OTHER_COLOR = "#1A1F3A"
TEXT_COLOR = "#F2F2F2"
