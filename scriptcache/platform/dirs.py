"""
Cache and config directory resolution.

POSIX hosts follow Cargo's layout:

    $CARGO_HOME/{script-cache,binary-cache}
    $HOME/.cargo/{script-cache,binary-cache}     (no $CARGO_HOME)

Before 0.2.0 a defined $CARGO_HOME put the caches one level deeper, under
$CARGO_HOME/.cargo. That legacy directory is still preferred while it holds
either cache, so nothing is lost before migration runs.

Windows hosts use the per-user app data folders instead.

Every call re-reads the environment; nothing is memoized.
"""

from __future__ import annotations

import os
from pathlib import Path

from ..errors import CacheDirError
from .env import EnvProvider, OsEnvProvider

SCRIPT_CACHE = "script-cache"
BINARY_CACHE = "binary-cache"

# Subtrees that make up a cache root, in migration order.
CACHE_SUBTREES: tuple[str, ...] = (SCRIPT_CACHE, BINARY_CACHE)

LEGACY_DIR_NAME = ".cargo"
WINDOWS_DIR_NAME = "Cargo"


class PosixDirectories:
    """Directory layout for POSIX hosts, driven by $CARGO_HOME and $HOME."""

    def __init__(self, env: EnvProvider | None = None):
        self.env = env or OsEnvProvider()

    def legacy_cache_dir(self) -> Path | None:
        """Return $CARGO_HOME/.cargo, or None when $CARGO_HOME is unset."""
        home = self.env.get("CARGO_HOME")
        if home is None:
            return None
        return Path(home).absolute() / LEGACY_DIR_NAME

    def cache_dir(self) -> Path:
        """
        Get a directory for user- and machine-specific cache data.

        Matches the location where Cargo keeps its own caches.

        Raises:
            CacheDirError: neither $CARGO_HOME nor $HOME is defined
        """
        home = self.env.get("CARGO_HOME")
        if home is not None:
            old_home = Path(home).absolute() / LEGACY_DIR_NAME
            if old_home.is_dir() and any((old_home / name).exists() for name in CACHE_SUBTREES):
                return old_home
            return Path(home).absolute()

        home = self.env.get("HOME")
        if home is not None:
            return Path(home).absolute() / LEGACY_DIR_NAME

        raise CacheDirError(["CARGO_HOME", "HOME"])

    def config_dir(self) -> Path:
        # Same as the cache directory for now. May diverge.
        return self.cache_dir()


class WindowsDirectories:
    """
    Directory layout for Windows hosts.

    Cache data is machine-specific and goes under %LOCALAPPDATA%; config
    roams with the user under %APPDATA%.
    """

    def __init__(self, env: EnvProvider | None = None):
        self.env = env or OsEnvProvider()

    def _known_folder(self, var: str) -> Path:
        value = self.env.get(var)
        if value is None:
            raise CacheDirError([var])
        return Path(value).absolute() / WINDOWS_DIR_NAME

    def legacy_cache_dir(self) -> Path | None:
        return None

    def cache_dir(self) -> Path:
        return self._known_folder("LOCALAPPDATA")

    def config_dir(self) -> Path:
        return self._known_folder("APPDATA")


Directories = WindowsDirectories if os.name == "nt" else PosixDirectories


def get_cache_dir(env: EnvProvider | None = None) -> Path:
    """Resolve the cache root for this host. Raises CacheDirError."""
    return Directories(env).cache_dir()


def get_config_dir(env: EnvProvider | None = None) -> Path:
    """Resolve the config root for this host. Raises CacheDirError."""
    return Directories(env).config_dir()


def get_legacy_cache_dir(env: EnvProvider | None = None) -> Path | None:
    """Resolve the pre-0.2.0 cache root, if this host ever had one."""
    return Directories(env).legacy_cache_dir()
