"""Current icon set for IconRandomizer.

The registry holds one immutable tuple of icons. ``install`` swaps in a
tuple built beforehand; ``pick_one`` reads the reference once and picks
from that snapshot, so readers need no lock and never see a partial set.
"""

import random


class IconRegistry:
    """Thread-safe holder of the icon set served on each ping."""

    def __init__(self, icons=(), rng=None):
        self._icons = tuple(icons)
        self._rng = rng or random.Random()

    def install(self, icons):
        """Replace the whole icon set. Visible to every later ``pick_one``."""
        self._icons = tuple(icons)

    def pick_one(self):
        """Return a uniformly random icon from the current set, or None if empty."""
        snapshot = self._icons
        if not snapshot:
            return None
        return snapshot[self._rng.randrange(len(snapshot))]

    def snapshot(self):
        return self._icons

    def __len__(self):
        return len(self._icons)
