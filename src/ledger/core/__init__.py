"""Core configuration and errors for Ledger."""

from .config import Config, MigrationConfig
from .exceptions import (
    DatabaseError,
    DuplicateMigrationError,
    LedgerError,
    MigrationError,
)

__all__ = [
    "Config",
    "MigrationConfig",
    "LedgerError",
    "DatabaseError",
    "MigrationError",
    "DuplicateMigrationError",
]
