"""
Environment variable providers.

Directory resolution reads the environment through a provider instead of
touching os.environ directly, so tests can drive it with a fixed mapping.
Providers are consulted on every call; nothing is cached.
"""

from __future__ import annotations

import os
from typing import Mapping, Protocol


class EnvProvider(Protocol):
    """Protocol for looking up environment variables by name."""

    def get(self, name: str) -> str | None:
        """
        Look up a variable.

        Args:
            name: Variable name (e.g., "CARGO_HOME")

        Returns:
            The value, or None if unset or empty.
        """
        ...


class OsEnvProvider:
    """Read variables from the live process environment."""

    def get(self, name: str) -> str | None:
        return os.environ.get(name) or None


class MappingEnvProvider:
    """
    Read variables from a fixed mapping.

    Example: MappingEnvProvider({"HOME": "/home/me"})
    """

    def __init__(self, values: Mapping[str, str] | None = None):
        self.values = dict(values or {})

    def get(self, name: str) -> str | None:
        return self.values.get(name) or None
