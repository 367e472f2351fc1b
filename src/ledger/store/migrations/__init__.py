"""Database migrations for Ledger.

Migrations are registered explicitly in ``registry.all_migrations()``,
ordered by ``collect()``, and applied with ``MigrationRunner``, which
tracks progress in SQLite's PRAGMA user_version.

Example:
    from ledger.store.migrations import MigrationRunner

    runner = MigrationRunner(connection)
    applied = runner.run()
"""

from .registry import (
    Migration,
    MigrationKind,
    all_migrations,
    collect,
    validate_unique,
)
from .runner import MigrationRunner

__all__ = [
    "Migration",
    "MigrationKind",
    "MigrationRunner",
    "all_migrations",
    "collect",
    "validate_unique",
]
