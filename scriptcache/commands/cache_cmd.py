"""Cache directory and migration CLI commands."""

from __future__ import annotations

import json
from typing import Any

from rich.console import Console
from rich.markup import escape

from ..errors import ScriptCacheError
from ..migrate import MigrationKind, migrate_old_data
from ..platform.dirs import get_cache_dir, get_config_dir, get_legacy_cache_dir
from ..platform.env import EnvProvider


def run_dirs(*, output_json: bool = False, env: EnvProvider | None = None) -> int:
    """Print the resolved cache, config and legacy directories."""
    console = Console()
    err = Console(stderr=True)

    try:
        cache_dir = get_cache_dir(env)
        config_dir = get_config_dir(env)
        legacy_dir = get_legacy_cache_dir(env)
        legacy_exists = legacy_dir is not None and legacy_dir.exists()
    except (ScriptCacheError, OSError) as e:
        err.print(f"error: {escape(str(e))}", style="bold red", soft_wrap=True)
        return 1

    data: dict[str, Any] = {
        "cache_dir": str(cache_dir),
        "config_dir": str(config_dir),
        "legacy_cache_dir": str(legacy_dir) if legacy_dir is not None else None,
        "legacy_exists": legacy_exists,
    }

    if output_json:
        print(json.dumps(data, indent=2, sort_keys=True))
        return 0

    console.print(f"cache:  {data['cache_dir']}", soft_wrap=True)
    console.print(f"config: {data['config_dir']}", soft_wrap=True)
    if legacy_dir is not None:
        state = "present" if data["legacy_exists"] else "absent"
        console.print(f"legacy: {data['legacy_cache_dir']} ({state})", style="dim", soft_wrap=True)
    return 0


def run_migrate(*, dry_run: bool = False, output_json: bool = False, env: EnvProvider | None = None) -> int:
    """Migrate a pre-0.2.0 cache layout, or report what would be migrated."""
    console = Console()
    err = Console(stderr=True)

    kind = MigrationKind.DRY_RUN if dry_run else MigrationKind.FOR_REAL
    report = migrate_old_data(kind, env=env)

    if output_json:
        print(
            json.dumps(
                {
                    "kind": report.kind.value,
                    "ok": report.ok,
                    "log": report.log,
                    "actions": [a.describe() for a in report.actions],
                    "error": str(report.error) if report.error is not None else None,
                },
                indent=2,
            )
        )
        return 0 if report.ok else 1

    if not report.log and report.ok:
        console.print("Nothing to migrate.", style="dim")

    prefix = "[dry run] " if dry_run else ""
    for line in report.log:
        console.print(f"{prefix}{line}", markup=False, highlight=False, soft_wrap=True)

    if report.error is not None:
        err.print(f"error: migration stopped: {escape(str(report.error))}", style="bold red", soft_wrap=True)
        err.print("Completed moves were kept; re-run to continue.", style="dim")
        return 1
    return 0
