"""Create the transactions table.

One row per booking: the debited and credited parties, their amounts,
and the time the row was written.
"""

from ..registry import Migration, MigrationKind

VERSION = 20260119
DESCRIPTION = "create transactions table"

SQL = """\
CREATE TABLE IF NOT EXISTS transactions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    debitor TEXT NOT NULL,
    debit REAL NOT NULL,
    creditor TEXT NOT NULL,
    credit REAL NOT NULL,
    timestamp DATETIME DEFAULT CURRENT_TIMESTAMP
);
"""


def migration() -> Migration:
    """Build the migration definition."""
    return Migration(
        version=VERSION,
        description=DESCRIPTION,
        sql=SQL,
        kind=MigrationKind.UP,
    )
