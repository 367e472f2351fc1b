"""SQLite database connection manager for Ledger."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from loguru import logger

from ..core.config import Config
from ..core.exceptions import DatabaseError, MigrationError
from .migrations import MigrationRunner


class Database:
    """SQLite database connection manager.

    Connecting brings the schema up to date by running all pending
    migrations.
    """

    def __init__(self, path: Path | None = None, config: Config | None = None):
        """Initialize database with path.

        Args:
            path: Path to the SQLite database file. Defaults to ``config.db_path``.
            config: Application configuration. Defaults to ``Config()``.

        Raises:
            DatabaseError: If both are given and the paths disagree.
        """
        if config is None:
            config = Config(db_path=Path(path)) if path is not None else Config()
        elif path is not None and Path(path) != Path(config.db_path):
            raise DatabaseError(
                f"Database path {path} does not match configured {config.db_path}"
            )
        self.config = config
        self.path = Path(config.db_path)
        self._connection: sqlite3.Connection | None = None

    def connect(self) -> None:
        """Open the database connection and apply pending migrations.

        Raises:
            MigrationError: If a migration is invalid or fails to apply.
            DatabaseError: If the database cannot be opened.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._connection = sqlite3.connect(str(self.path))
            self._connection.row_factory = sqlite3.Row
            self._connection.execute("PRAGMA foreign_keys = ON")
            self._migrate()
        except MigrationError:
            self.close()
            raise
        except Exception as e:
            self.close()
            raise DatabaseError(f"Failed to connect to database: {e}") from e

    def close(self) -> None:
        """Close database connection."""
        if self._connection:
            try:
                self._connection.close()
            except Exception as e:
                raise DatabaseError(f"Failed to close database: {e}") from e
            finally:
                self._connection = None

    @property
    def schema_version(self) -> int:
        """Schema version recorded in the database."""
        return self.execute("PRAGMA user_version").fetchone()[0]

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Cursor]:
        """Context manager for database transactions.

        Yields:
            A cursor for executing SQL statements.

        Raises:
            DatabaseError: If connection is not available or transaction fails.
        """
        if not self._connection:
            raise DatabaseError("Database not connected")

        cursor = self._connection.cursor()
        try:
            yield cursor
            self._connection.commit()
        except Exception as e:
            self._connection.rollback()
            raise DatabaseError(f"Transaction failed: {e}") from e
        finally:
            cursor.close()

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """Execute a SQL query.

        Args:
            sql: SQL statement to execute.
            params: Parameters for the SQL statement.

        Returns:
            A cursor with the query results.

        Raises:
            DatabaseError: If connection is not available or query fails.
        """
        if not self._connection:
            raise DatabaseError("Database not connected")

        try:
            return self._connection.execute(sql, params)
        except Exception as e:
            raise DatabaseError(f"Query execution failed: {e}") from e

    def executescript(self, sql: str) -> None:
        """Execute multiple SQL statements.

        Raises:
            DatabaseError: If connection is not available or script fails.
        """
        if not self._connection:
            raise DatabaseError("Database not connected")

        try:
            self._connection.executescript(sql)
        except Exception as e:
            raise DatabaseError(f"Script execution failed: {e}") from e

    def _migrate(self) -> None:
        """Bring the schema up to the latest migration."""
        runner = MigrationRunner(
            self._connection, strict=self.config.migrations.strict
        )
        applied = runner.run()
        if applied:
            logger.info(f"Migrated {self.path} to version {runner.get_version()}")
