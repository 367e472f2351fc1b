"""Custom exceptions for Ledger."""


class LedgerError(Exception):
    """Base exception for all Ledger errors."""

    pass


class DatabaseError(LedgerError):
    """Database operation failed."""

    pass


class MigrationError(LedgerError):
    """Migration definition or application failed."""

    pass


class DuplicateMigrationError(MigrationError):
    """Two migration definitions share a version."""

    def __init__(self, version: int, description: str):
        """Initialize exception with the clashing migration.

        Args:
            version: The duplicated version number.
            description: Description of the second definition at that version.
        """
        self.version = version
        self.description = description
        super().__init__(f"Duplicate migration version: {version} ({description})")
