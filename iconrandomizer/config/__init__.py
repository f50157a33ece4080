from .config import (
    ACCENT_COLOR,
    BACKGROUND_COLOR,
    DATA_DIR,
    HOVER_COLOR,
    LOG_LEVEL,
    MAX_PLAYERS,
    OTHER_COLOR,
    PREFERRED_PORT,
    PROTOCOL_VERSION,
    SERVER_HOST,
    SERVER_MOTD,
    SERVER_PORT_AUTO_FALLBACK,
    TEXT_COLOR,
    VERSION_NAME,
)
from .icon_config import IconConfig, load_icon_config, resolve_config
from .ports import find_available_port

__all__ = [
    "ACCENT_COLOR",
    "BACKGROUND_COLOR",
    "DATA_DIR",
    "HOVER_COLOR",
    "LOG_LEVEL",
    "MAX_PLAYERS",
    "OTHER_COLOR",
    "PREFERRED_PORT",
    "PROTOCOL_VERSION",
    "SERVER_HOST",
    "SERVER_MOTD",
    "SERVER_PORT_AUTO_FALLBACK",
    "TEXT_COLOR",
    "VERSION_NAME",
    "IconConfig",
    "load_icon_config",
    "resolve_config",
    "find_available_port",
]
