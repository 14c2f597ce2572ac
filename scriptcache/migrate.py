"""
One-time migrations of the cache directory layout.

Migrations run at every start and must be safe to repeat: each one checks
what is already in place and only touches what still needs moving. Nothing
is ever overwritten. When both the old and the new location of a cache
exist, both are left alone and the user is told to reconcile them.

All filesystem access goes through a FilesystemActions object. The real
one performs mutations; the dry-run one records them and answers later
queries as if they had happened. The decision logic is therefore the same
code in both modes, and a dry run reports exactly what a real run would.

The caller gets a MigrationReport: the user-facing log lines, the actions
taken (or planned), and the first error if one stopped the run. Completed
moves are not rolled back; the caller may simply run again.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Protocol

from .platform.dirs import CACHE_SUBTREES, Directories
from .platform.env import EnvProvider, OsEnvProvider

logger = logging.getLogger(__name__)


class MigrationKind(str, Enum):
    DRY_RUN = "dry_run"
    FOR_REAL = "for_real"

    @property
    def for_real(self) -> bool:
        return self is MigrationKind.FOR_REAL


@dataclass(frozen=True)
class FsAction:
    """A filesystem mutation, performed or planned."""

    op: str  # "rename" or "remove_dir"
    src: Path
    dst: Path | None = None

    def describe(self) -> str:
        if self.dst is None:
            return f"{self.op} {self.src}"
        return f"{self.op} {self.src} -> {self.dst}"


class FilesystemActions(Protocol):
    """Capability for querying and mutating the filesystem during migration."""

    dry_run: bool
    actions: list[FsAction]

    def exists(self, path: Path) -> bool:
        ...

    def is_empty(self, path: Path) -> bool:
        ...

    def rename(self, src: Path, dst: Path) -> None:
        ...

    def remove_dir(self, path: Path) -> None:
        ...


class RealFilesystem:
    """Performs every mutation immediately. OSError propagates."""

    dry_run = False

    def __init__(self) -> None:
        self.actions: list[FsAction] = []

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_empty(self, path: Path) -> bool:
        with os.scandir(path) as it:
            return next(it, None) is None

    def rename(self, src: Path, dst: Path) -> None:
        os.rename(src, dst)
        self.actions.append(FsAction("rename", src, dst))

    def remove_dir(self, path: Path) -> None:
        os.rmdir(path)
        self.actions.append(FsAction("remove_dir", path))


class DryRunFilesystem:
    """
    Records mutations without performing them.

    Queries reflect the recorded mutations: a renamed source no longer
    exists, its destination does, and a directory whose entries were all
    moved away reads as empty.
    """

    dry_run = True

    def __init__(self) -> None:
        self.actions: list[FsAction] = []
        self._gone: set[Path] = set()
        self._added: set[Path] = set()

    def _is_gone(self, path: Path) -> bool:
        return any(path == p or p in path.parents for p in self._gone)

    def exists(self, path: Path) -> bool:
        if self._is_gone(path):
            return False
        if any(path == p or p in path.parents for p in self._added):
            return True
        return path.exists()

    def is_empty(self, path: Path) -> bool:
        with os.scandir(path) as it:
            on_disk = [Path(entry.path) for entry in it]
        remaining = [p for p in on_disk if not self._is_gone(p)]
        remaining += [p for p in self._added if p.parent == path]
        return not remaining

    def rename(self, src: Path, dst: Path) -> None:
        self._gone.add(src)
        self._added.add(dst)
        self.actions.append(FsAction("rename", src, dst))

    def remove_dir(self, path: Path) -> None:
        self._gone.add(path)
        self.actions.append(FsAction("remove_dir", path))


@dataclass
class MigrationReport:
    """Outcome of a migration run."""

    kind: MigrationKind
    log: list[str] = field(default_factory=list)
    actions: list[FsAction] = field(default_factory=list)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error


def _q(path: Path) -> str:
    return repr(str(path))


def migrate_0_2_0(env: EnvProvider, fs: FilesystemActions, log: list[str]) -> None:
    """
    Move caches out of $CARGO_HOME/.cargo into $CARGO_HOME.

    Before 0.2.0, a defined $CARGO_HOME on POSIX put the caches one level
    too deep. $HOME-based roots were never affected.
    """
    old_base = Directories(env).legacy_cache_dir()
    if old_base is None or not fs.exists(old_base):
        return

    # The logger records what we are about to try; `log` records what the user should hear.
    logger.info("<0.2.0 cache directory (%s) exists; attempting migration", old_base)

    new_base = old_base.parent
    for name in CACHE_SUBTREES:
        old_cache = old_base / name
        new_cache = new_base / name
        old_exists = fs.exists(old_cache)
        new_exists = fs.exists(new_cache)

        if not old_exists:
            logger.info("not migrating %s; does not exist", old_cache)
        elif new_exists:
            logger.info("not migrating %s; already exists at new location", old_cache)
            log.append(f"Did not move {_q(old_cache)}: new location {_q(new_cache)} already exists.")
        else:
            logger.info("migrating %s -> %s", old_cache, new_cache)
            fs.rename(old_cache, new_cache)
            log.append(f"Moved {_q(old_cache)} to {_q(new_cache)}.")

    if fs.is_empty(old_base):
        logger.info("%s is empty; removing", old_base)
        fs.remove_dir(old_base)
        log.append(f"Removed empty directory {_q(old_base)}.")
    else:
        logger.info("not removing %s; not empty", old_base)
        log.append(f"Not removing {_q(old_base)}: not empty.")

    logger.info("done with migration")


MigrationStep = Callable[[EnvProvider, FilesystemActions, list[str]], None]

# Applied in order; each step must be idempotent.
MIGRATIONS: list[MigrationStep] = [
    migrate_0_2_0,
]


def migrate_old_data(
    kind: MigrationKind,
    env: EnvProvider | None = None,
    fs: FilesystemActions | None = None,
) -> MigrationReport:
    """
    Run all layout migrations.

    Args:
        kind: DRY_RUN to only report, FOR_REAL to move files
        env: Environment provider (defaults to the process environment)
        fs: Filesystem capability (defaults to one matching `kind`)

    Raises:
        ValueError: `fs` performs mutations in a dry run, or only records
            them in a real one

    Returns:
        MigrationReport. Stops at the first OSError, which is kept in
        `report.error` alongside the log accumulated up to that point.
    """
    env = env or OsEnvProvider()
    if fs is None:
        fs = RealFilesystem() if kind.for_real else DryRunFilesystem()
    elif fs.dry_run == kind.for_real:
        raise ValueError(f"{type(fs).__name__} cannot run a {kind.value} migration")

    report = MigrationReport(kind=kind)
    try:
        for step in MIGRATIONS:
            step(env, fs, report.log)
    except OSError as e:
        logger.warning("migration stopped: %s", e)
        report.error = e
    report.actions = list(fs.actions)
    return report
