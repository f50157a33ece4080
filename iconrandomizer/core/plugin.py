"""IconRandomizer plugin core.

The host calls ``on_initialize`` once at startup and ``on_ping`` for every
inbound status query. ``on_ping`` only reads the registry; all file I/O
happens in ``on_initialize`` and ``reload``.
"""

import logging
import threading
from pathlib import Path

from iconrandomizer.config.icon_config import load_icon_config
from iconrandomizer.core.icons import load_icons
from iconrandomizer.core.paths import resolve_server_root
from iconrandomizer.core.registry import IconRegistry

logger = logging.getLogger(__name__)


class IconRandomizer:
    """Serves a random icon from the configured set on each ping."""

    def __init__(self, data_dir, registry=None):
        self.data_dir = Path(data_dir)
        self.server_root = resolve_server_root(self.data_dir)
        self.registry = registry if registry is not None else IconRegistry()
        self._load_lock = threading.Lock()

    def on_initialize(self):
        """Create the data directory, load the configuration and install the first icon set.

        Returns:
            False if the data directory could not be created, True otherwise
        """
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError:
            logger.exception("Failed to set up IconRandomizer data directory %s.", self.data_dir)
            return False

        self.reload()
        return True

    def reload(self):
        """Re-read the configuration and swap in a freshly loaded icon set.

        Only one load runs at a time; pings keep using the old set until
        the swap.

        Returns:
            Number of icons now installed
        """
        with self._load_lock:
            config = load_icon_config(self.data_dir)
            icons = load_icons(config, self.server_root)
            self.registry.install(icons)

        if icons:
            logger.info("Loaded %d icons. Rotating on each server list refresh.", len(icons))
        else:
            logger.warning(
                "No icons loaded. The default server icon will be used until you add icons.")
        return len(icons)

    def on_ping(self, reply):
        """Attach a random icon to ``reply``; return it unchanged when no icons are loaded."""
        icon = self.registry.pick_one()
        if icon is None:
            return reply
        return reply.with_favicon(icon.data_uri)

    @property
    def icon_count(self):
        return len(self.registry)
