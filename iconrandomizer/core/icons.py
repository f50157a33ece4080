"""Icon loading for IconRandomizer.

Finds candidate image files from the icon policy and decodes each one
into an immutable :class:`Icon` ready to be attached to a status reply.
Files that cannot be read or decoded are skipped with a warning.
"""

import base64
import io
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image

from .paths import resolve_path

logger = logging.getLogger(__name__)

ICON_SUFFIX = ".png"
ICON_MIME = "image/png"

# Errors Pillow and the filesystem raise for unreadable or corrupt images.
DECODE_ERRORS = (OSError, ValueError, SyntaxError, Image.DecompressionBombError)


@dataclass(frozen=True)
class Icon:
    """A decoded server icon. The payload is always PNG encoded."""

    path: Path
    data: bytes = field(repr=False)
    width: int
    height: int
    source_format: str = "PNG"
    data_uri: str = field(default="", repr=False, compare=False)

    @property
    def mime_type(self):
        return ICON_MIME


def encode_data_uri(payload):
    return f"data:{ICON_MIME};base64," + base64.b64encode(payload).decode("ascii")


def decode_icon(path):
    """Read and fully decode an image file into an :class:`Icon`.

    PNG files keep their original bytes; any other format Pillow can read
    is re-encoded to PNG here, so nothing is encoded when serving.

    Raises:
        OSError, ValueError, SyntaxError: the file is unreadable or not a valid image
    """
    path = Path(path)
    raw = path.read_bytes()

    with Image.open(io.BytesIO(raw)) as image:
        image.load()
        width, height = image.size
        source_format = image.format or "UNKNOWN"
        if source_format == "PNG":
            payload = raw
        else:
            buffer = io.BytesIO()
            image.convert("RGBA").save(buffer, format="PNG")
            payload = buffer.getvalue()

    return Icon(
        path=path,
        data=payload,
        width=width,
        height=height,
        source_format=source_format,
        data_uri=encode_data_uri(payload),
    )


def is_icon_file_name(name):
    return name.lower().endswith(ICON_SUFFIX)


def scan_icon_folder(folder):
    """List the ``.png`` regular files directly inside ``folder``.

    Entries come back in directory enumeration order, which depends on
    the filesystem and is not alphabetical.
    """
    candidates = []
    try:
        with os.scandir(folder) as entries:
            for entry in entries:
                if is_icon_file_name(entry.name) and entry.is_file():
                    candidates.append(Path(entry.path))
    except OSError as exc:
        logger.warning("Failed to read icons from folder %s: %s", folder, exc)
    return candidates


def collect_candidates(config, base):
    """Return the icon paths the policy points at, in load order."""
    if config.icon_files:
        return [resolve_path(base, configured) for configured in config.icon_files]

    folder = resolve_path(base, config.icon_folder)
    if not folder.is_dir():
        logger.warning(
            "Icon folder %s does not exist. Create it and place 64x64 PNG icons inside.", folder)
        return []
    return scan_icon_folder(folder)


def load_icons(config, base):
    """Load every icon the policy names, skipping files that fail to decode.

    Args:
        config: IconConfig with the folder and optional explicit file list
        base: Directory relative entries are resolved against

    Returns:
        Tuple of Icon in candidate order, possibly empty
    """
    loaded = []
    for path in collect_candidates(config, base):
        try:
            loaded.append(decode_icon(path))
        except DECODE_ERRORS as exc:
            logger.warning("Skipping icon %s: %s", path, exc)
    return tuple(loaded)
