"""Migration definitions and the registry that orders them.

Every known migration is listed explicitly in ``all_migrations()``.
``collect()`` sorts them by version and, in strict mode, rejects
duplicate versions before anything touches the database.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from loguru import logger

from ...core.exceptions import DuplicateMigrationError, MigrationError

# Applied versions live in PRAGMA user_version, a signed 32-bit integer
MAX_VERSION = 2**31 - 1


class MigrationKind(Enum):
    """Direction of a schema change."""

    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class Migration:
    """A single versioned schema change."""

    version: int
    description: str
    sql: str
    kind: MigrationKind = MigrationKind.UP

    def __post_init__(self) -> None:
        if not isinstance(self.version, int) or isinstance(self.version, bool):
            raise MigrationError(
                f"Migration version must be an integer: {self.version!r}"
            )
        if not 0 <= self.version <= MAX_VERSION:
            raise MigrationError(
                f"Migration version must be between 0 and {MAX_VERSION}: "
                f"{self.version}"
            )

    def __repr__(self) -> str:
        return f"Migration({self.version}, {self.description!r}, {self.kind.value})"


def all_migrations() -> list[Migration]:
    """Build the list of every known migration.

    Add new migrations here.

    Returns:
        Unordered list of Migration objects, rebuilt on each call.
    """
    from .versions import m20260119_create_transactions_table

    return [
        m20260119_create_transactions_table.migration(),
    ]


def validate_unique(migrations: Iterable[Migration]) -> None:
    """Ensure no two migrations share a version.

    Args:
        migrations: Migrations to check.

    Raises:
        DuplicateMigrationError: On the first repeated version.
    """
    seen: set[int] = set()
    for migration in migrations:
        if migration.version in seen:
            raise DuplicateMigrationError(migration.version, migration.description)
        seen.add(migration.version)


def collect(
    migrations: Iterable[Migration] | None = None,
    strict: bool = True,
) -> list[Migration]:
    """Get all migrations, sorted by version.

    Args:
        migrations: Migrations to order. Defaults to ``all_migrations()``.
        strict: Reject duplicate versions. When False the check is skipped
            and duplicates pass through in their original relative order.

    Returns:
        List of Migration objects sorted by version number.

    Raises:
        DuplicateMigrationError: If strict and two migrations share a version.
    """
    if migrations is None:
        migrations = all_migrations()

    ordered = sorted(migrations, key=lambda m: m.version)

    if strict:
        validate_unique(ordered)

    logger.debug(
        f"Collected {len(ordered)} migration(s): {[m.version for m in ordered]}"
    )
    return ordered
