"""IconRandomizer - rotate the server-list icon on every status ping."""

__version__ = "1.0.0"
