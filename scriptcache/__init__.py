"""scriptcache - cache directory, path record and migration support for a script runner."""

__version__ = "0.2.0"
