"""Icon policy for IconRandomizer.

Reads ``config.properties`` from the plugin data directory and turns it
into an :class:`IconConfig`: the folder to scan plus an optional explicit
list of icon files. Missing or malformed keys fall back to defaults, and
a default document is written the first time the plugin starts.
"""

import io
import logging
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.properties"
DEFAULT_ICON_FOLDER = "icons"

DEFAULT_CONFIG_TEMPLATE = """\
# IconRandomizer configuration
# icon-folder: folder (relative to your proxy root) containing .png icons.
# If icon-files is empty, all .png files in icon-folder will be used.
icon-folder=icons

# icon-files: optional comma-separated list of icon paths (relative or absolute).
# When set, only these files are used and icon-folder is ignored.
icon-files=
"""


@dataclass(frozen=True)
class IconConfig:
    """Normalized icon policy. A non-empty ``icon_files`` overrides ``icon_folder``."""

    icon_folder: str = DEFAULT_ICON_FOLDER
    icon_files: tuple = ()


def parse_icon_files(value):
    """Split a comma-separated list, trimming entries and dropping empty ones.

    Order is preserved and duplicates are kept.
    """
    if not value:
        return ()
    return tuple(entry.strip() for entry in value.split(",") if entry.strip())


def resolve_config(raw_text):
    """Build an :class:`IconConfig` from the raw document text. Never raises."""
    values = dotenv_values(stream=io.StringIO(raw_text or ""), interpolate=False)

    folder = (values.get("icon-folder") or "").strip()
    files = parse_icon_files(values.get("icon-files") or "")

    return IconConfig(icon_folder=folder or DEFAULT_ICON_FOLDER, icon_files=files)


def write_default_config(config_path):
    """Write the default configuration document, creating parent folders."""
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(DEFAULT_CONFIG_TEMPLATE, encoding="utf-8")


def load_icon_config(data_dir):
    """Load the icon policy from ``<data_dir>/config.properties``.

    Writes the default document first if none exists. Read or write
    failures are logged and the defaults are used instead.
    """
    config_path = Path(data_dir) / CONFIG_FILE_NAME

    if not config_path.exists():
        try:
            write_default_config(config_path)
            logger.info("Wrote default configuration to %s", config_path)
        except OSError as exc:
            logger.warning("Could not write default configuration %s: %s", config_path, exc)
            return IconConfig()

    try:
        raw_text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read configuration %s, using defaults: %s", config_path, exc)
        return IconConfig()

    return resolve_config(raw_text)
