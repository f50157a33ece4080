"""Path resolution for configured icon locations.

Relative entries are resolved against the host root directory, two levels
above the plugin data directory (``<root>/plugins/<plugin>``).
"""

import os
from pathlib import Path


def resolve_server_root(data_dir):
    """Return the host root directory for a plugin data directory.

    Falls back to the nearest existing ancestor, then to the data
    directory itself, when the tree is too shallow.
    """
    data_dir = Path(os.path.abspath(data_dir))
    parent = data_dir.parent
    if parent == data_dir:
        return data_dir
    root = parent.parent
    if root == parent:
        return parent
    return root


def resolve_path(base, configured):
    """Resolve a configured path against ``base`` and normalize it.

    Absolute paths are only normalized. Nothing is checked on disk.
    """
    path = Path(configured)
    if not path.is_absolute():
        path = Path(base) / path
    return Path(os.path.normpath(path))
