"""Data access layer for Ledger.

This package provides the SQLite connection manager and the schema
migrations it applies on connect.

Example:
    from ledger.store import Database

    db = Database(Path("ledger.db"))
    db.connect()
"""

from .database import Database

__all__ = [
    "Database",
]
