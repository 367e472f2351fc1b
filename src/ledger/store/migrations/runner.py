"""Database migration runner for Ledger.

Uses SQLite PRAGMA user_version for tracking schema version.
Migrations are applied in order and are idempotent.
"""

from __future__ import annotations

import sqlite3
from typing import Iterable

from loguru import logger

from ...core.exceptions import MigrationError
from .registry import MAX_VERSION, Migration, MigrationKind, collect


class MigrationRunner:
    """Applies versioned migrations to a SQLite database.

    Uses PRAGMA user_version to track the highest applied version.
    Migrations come from the registry and are applied in version order.
    Only forward migrations are applied; backward ones are listed but
    never run.

    Example:
        runner = MigrationRunner(connection)
        applied = runner.run()
        print(f"Applied {applied} migrations, now at version {runner.get_version()}")
    """

    def __init__(
        self,
        connection: sqlite3.Connection,
        strict: bool = True,
        migrations: Iterable[Migration] | None = None,
    ):
        """Initialize with database connection.

        Args:
            connection: SQLite connection to migrate.
            strict: Reject duplicate migration versions.
            migrations: Migrations to use instead of the registered set.
        """
        self.conn = connection
        self.strict = strict
        self._source = list(migrations) if migrations is not None else None

    def get_version(self) -> int:
        """Get current schema version from user_version pragma."""
        cursor = self.conn.execute("PRAGMA user_version")
        return cursor.fetchone()[0]

    def set_version(self, version: int) -> None:
        """Set schema version.

        Args:
            version: New version number to set.

        Raises:
            MigrationError: If version does not fit in user_version.
        """
        if not 0 <= version <= MAX_VERSION:
            raise MigrationError(
                f"Schema version must be between 0 and {MAX_VERSION}: {version}"
            )
        # PRAGMA doesn't support parameters; version is an int
        self.conn.execute(f"PRAGMA user_version = {int(version)}")

    def get_migrations(self) -> list[Migration]:
        """Get all available migrations, sorted by version."""
        return collect(self._source, strict=self.strict)

    def get_pending_migrations(self) -> list[Migration]:
        """Get forward migrations that haven't been applied yet.

        Returns:
            List of UP migrations with version > current version.
        """
        current = self.get_version()
        return [
            m
            for m in self.get_migrations()
            if m.kind is MigrationKind.UP and m.version > current
        ]

    def run(self) -> int:
        """Apply all pending migrations.

        Each migration's script and its version bump run in a single
        transaction. On failure the transaction is rolled back and the
        version is left at the last successful migration. Scripts must
        not contain their own BEGIN or COMMIT.

        Returns:
            Number of migrations applied.

        Raises:
            MigrationError: If any migration fails.
        """
        pending = self.get_pending_migrations()

        if not pending:
            logger.debug(
                f"Database at version {self.get_version()}, no migrations to apply"
            )
            return 0

        applied = 0
        for migration in pending:
            logger.info(
                f"Applying migration {migration.version}: {migration.description}"
            )

            # executescript commits on entry and runs in autocommit, so the
            # script and the version bump need their own transaction
            script = (
                "BEGIN;\n"
                f"{migration.sql};\n"
                f"PRAGMA user_version = {int(migration.version)};\n"
                "COMMIT;"
            )
            try:
                self.conn.executescript(script)
            except sqlite3.Error as e:
                logger.error(f"Migration {migration.version} failed: {e}")
                if self.conn.in_transaction:
                    self.conn.rollback()
                raise MigrationError(
                    f"Migration {migration.version} ({migration.description}) failed: {e}"
                ) from e

            applied += 1
            logger.debug(f"Migration {migration.version} applied successfully")

        logger.info(
            f"Applied {applied} migration(s), "
            f"database now at version {self.get_version()}"
        )
        return applied

    def get_latest_version(self) -> int:
        """Get the latest available forward migration version.

        Returns:
            Highest UP migration version, or 0 if none.
        """
        versions = [
            m.version for m in self.get_migrations() if m.kind is MigrationKind.UP
        ]
        return max(versions, default=0)

    def is_up_to_date(self) -> bool:
        """Check if database is at latest version."""
        return self.get_version() >= self.get_latest_version()
