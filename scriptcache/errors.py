"""
Error types for cache directory resolution and path records.

Errors carry a blame so the caller can decide how to present them:
HUMAN errors come from user or environment misconfiguration and have an
actionable message; INTERNAL errors are everything else.
"""

from __future__ import annotations

from enum import Enum


class Blame(str, Enum):
    HUMAN = "human"  # Fixable by the user (environment, configuration)
    INTERNAL = "internal"  # I/O failures, corrupt data


class ScriptCacheError(Exception):
    """Base class for scriptcache errors."""

    blame: Blame = Blame.INTERNAL

    def __init__(self, message: str, *, blame: Blame | None = None):
        super().__init__(message)
        if blame is not None:
            self.blame = blame

    @property
    def is_human(self) -> bool:
        return self.blame is Blame.HUMAN


class CacheDirError(ScriptCacheError):
    """No cache or config directory could be derived from the environment."""

    blame = Blame.HUMAN

    def __init__(self, missing: list[str]):
        self.missing = list(missing)
        names = [f"${name}" for name in self.missing]
        if len(names) > 1:
            message = f"neither {' nor '.join(names)} is defined"
        else:
            message = f"{names[0]} is not defined"
        super().__init__(message)


class CorruptPathError(ScriptCacheError, ValueError):
    """An encoded path record could not be decoded."""
