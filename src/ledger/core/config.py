"""Configuration management for Ledger."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class MigrationConfig:
    """Schema migration configuration."""

    # Reject duplicate migration versions when collecting
    strict: bool = True


def _default_db_path() -> Path:
    """Get default database path."""
    return Path.home() / ".local" / "share" / "ledger" / "ledger.db"


@dataclass
class Config:
    """Main application configuration."""

    db_path: Path = field(default_factory=_default_db_path)
    migrations: MigrationConfig = field(default_factory=MigrationConfig)
