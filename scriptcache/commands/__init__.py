"""Command implementations behind the scriptcache CLI."""
