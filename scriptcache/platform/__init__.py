"""
Platform-specific support: directories, path records, timestamps.

Each module selects the implementation for the host platform family once,
at import time. Callers use the module-level functions and never branch on
the platform themselves.
"""

from __future__ import annotations

from .clock import current_time, file_last_modified, is_fresh
from .console import force_build_color
from .dirs import get_cache_dir, get_config_dir, get_legacy_cache_dir
from .env import EnvProvider, MappingEnvProvider, OsEnvProvider
from .pathcodec import PATH_CODEC, read_path, write_path

__all__ = [
    # Timestamps
    "current_time",
    "file_last_modified",
    "is_fresh",
    # Terminal
    "force_build_color",
    # Directories
    "get_cache_dir",
    "get_config_dir",
    "get_legacy_cache_dir",
    # Environment
    "EnvProvider",
    "MappingEnvProvider",
    "OsEnvProvider",
    # Path records
    "PATH_CODEC",
    "read_path",
    "write_path",
]
