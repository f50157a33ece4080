"""
Tests for the icon registry: random picks, whole-set swaps and thread safety.
"""

import random
import threading
from collections import Counter

from iconrandomizer.core.registry import IconRegistry


class TestPickOne:
    """Test picking icons from the current set."""

    def test_empty_registry_returns_none(self):
        registry = IconRegistry()
        assert all(registry.pick_one() is None for _ in range(100))

    def test_pick_is_a_member(self):
        icons = ("a", "b", "c")
        registry = IconRegistry(icons)
        assert all(registry.pick_one() in icons for _ in range(1000))

    def test_single_icon_always_picked(self):
        registry = IconRegistry(["only"])
        assert {registry.pick_one() for _ in range(50)} == {"only"}

    def test_pick_does_not_mutate_set(self):
        registry = IconRegistry(["a", "b"])
        for _ in range(100):
            registry.pick_one()
        assert registry.snapshot() == ("a", "b")

    def test_distribution_is_uniform(self):
        """Each of k icons is picked close to 1/k of the time."""
        icons = ("a", "b", "c", "d")
        registry = IconRegistry(icons, rng=random.Random(1234))
        draws = 20000

        counts = Counter(registry.pick_one() for _ in range(draws))

        assert set(counts) == set(icons)
        for icon in icons:
            assert abs(counts[icon] / draws - 1 / len(icons)) < 0.02


class TestInstall:
    """Test replacing the icon set."""

    def test_install_replaces_whole_set(self):
        registry = IconRegistry(["old"])
        registry.install(["new-1", "new-2"])
        assert registry.snapshot() == ("new-1", "new-2")
        assert len(registry) == 2

    def test_install_empty_set(self):
        registry = IconRegistry(["old"])
        registry.install([])
        assert registry.pick_one() is None
        assert len(registry) == 0

    def test_install_copies_input(self):
        """Mutating the list passed to install does not change the registry."""
        icons = ["a"]
        registry = IconRegistry()
        registry.install(icons)
        icons.append("b")
        assert registry.snapshot() == ("a",)

    def test_snapshot_is_immutable(self):
        registry = IconRegistry(["a"])
        assert isinstance(registry.snapshot(), tuple)

    def test_concurrent_install_never_mixes_sets(self):
        """Picks racing with installs only ever return members of the old or new set."""
        old_set = tuple(f"old-{i}" for i in range(5))
        new_set = tuple(f"new-{i}" for i in range(7))
        allowed = set(old_set) | set(new_set)
        registry = IconRegistry(old_set)
        start = threading.Barrier(9)
        unexpected = []

        def reader():
            start.wait()
            for _ in range(5000):
                icon = registry.pick_one()
                if icon not in allowed:
                    unexpected.append(icon)

        def writer():
            start.wait()
            for i in range(500):
                registry.install(new_set if i % 2 == 0 else old_set)
            registry.install(new_set)

        threads = [threading.Thread(target=reader) for _ in range(8)]
        threads.append(threading.Thread(target=writer))
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert unexpected == []
        assert registry.snapshot() == new_set
